"""Auth provider protocol for pluggable authentication backends."""

from __future__ import annotations

import typing as t
from abc import abstractmethod

from boilerkpi.model import UserAccount


class AuthResult(t.NamedTuple):
    """Result of an authentication attempt."""

    success: bool
    user: UserAccount | None = None
    error: str | None = None


class AuthProvider(t.Protocol):
    """Protocol for authentication providers.

    The only implementation keeps accounts in the local key-value store; the
    protocol keeps CLI commands independent of where accounts live.
    """

    @abstractmethod
    def authenticate(self, username: str, password: str) -> AuthResult:
        """Authenticate with username (email) and password, starting a session on success."""
        ...

    @abstractmethod
    def register(
        self,
        username: str,
        password: str,
        full_name: str,
        role: str = "",
        department: str = "",
        avatar: str | None = None,
    ) -> AuthResult:
        """Register a new account and log it in.

        Args:
            username: Email address used to log in
            password: Plain text password to hash
            full_name: Display name
            role: Job title shown in the header
            department: Department shown in the header
            avatar: Optional avatar image URL

        Returns:
            AuthResult with the created account or error.
        """
        ...

    @abstractmethod
    def current_user(self) -> UserAccount | None:
        """Get the account of the current session, if any."""
        ...

    @abstractmethod
    def logout(self) -> None: ...
