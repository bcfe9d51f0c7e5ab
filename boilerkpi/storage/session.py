from __future__ import annotations

import logging

import pydantic as p

from boilerkpi.core import di
from boilerkpi.model import UserAccount

from .store import KeyValueStore

logger = logging.getLogger(__name__)

SESSION_KEY = "boiler_kpi_current_session"


def get(*, store: KeyValueStore = di.Provide["storage.store"]) -> UserAccount | None:
    """Get the logged-in account, if any; malformed data reads as logged out."""
    raw = store.get(SESSION_KEY)
    if raw is None:
        return None
    try:
        return UserAccount.model_validate_json(raw)
    except p.ValidationError as e:
        logger.warning("ignoring malformed session data", extra={"key": SESSION_KEY, "errors": e.error_count()})
        return None


def put(account: UserAccount, *, store: KeyValueStore = di.Provide["storage.store"]) -> None:
    # the session record never carries the password hash
    store.set(SESSION_KEY, account.model_dump_json(exclude={"password_hash"}))


def clear(*, store: KeyValueStore = di.Provide["storage.store"]) -> None:
    store.delete(SESSION_KEY)
