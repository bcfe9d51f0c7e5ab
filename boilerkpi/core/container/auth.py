"""Authentication container for dependency injection."""

from __future__ import annotations

from dependency_injector.containers import DeclarativeContainer
from dependency_injector.providers import Factory, Provider

from boilerkpi.auth.local import LocalAuthProvider
from boilerkpi.storage.store import KeyValueStore


class AuthContainer(DeclarativeContainer):
    """Container for authentication services."""

    store: Provider[KeyValueStore] = Provider()

    provider: Provider[LocalAuthProvider] = Factory(
        LocalAuthProvider,
        store=store,
    )
