"""Local authentication provider using bcrypt for password hashing."""

from __future__ import annotations

import logging

import bcrypt

from boilerkpi.model import UserAccount
from boilerkpi.storage import account as account_storage
from boilerkpi.storage import session as session_storage
from boilerkpi.storage.store import KeyValueStore

from .provider import AuthProvider, AuthResult

logger = logging.getLogger(__name__)

DUPLICATE_EMAIL = "Email này đã được đăng ký."
INVALID_CREDENTIALS = "Sai thông tin tài khoản hoặc mật khẩu."


class LocalAuthProvider(AuthProvider):
    """Accounts and the current session kept in the key-value store.

    Passwords are stored as bcrypt hashes.
    """

    def __init__(self, store: KeyValueStore) -> None:
        self._store = store

    def authenticate(self, username: str, password: str) -> AuthResult:
        account = account_storage.get(username, store=self._store)
        if account is None or not self.verify_password(account, password):
            logger.info("rejected login", extra={"username": username})
            return AuthResult(success=False, error=INVALID_CREDENTIALS)

        session_storage.put(account, store=self._store)
        logger.info("logged in", extra={"account_id": account.id})
        return AuthResult(success=True, user=account)

    def register(
        self,
        username: str,
        password: str,
        full_name: str,
        role: str = "",
        department: str = "",
        avatar: str | None = None,
    ) -> AuthResult:
        if account_storage.get(username, store=self._store) is not None:
            return AuthResult(success=False, error=DUPLICATE_EMAIL)

        account = account_storage.create(
            username=username,
            password_hash=self._hash_password(password),
            full_name=full_name,
            role=role,
            department=department,
            avatar=avatar,
            store=self._store,
        )
        logger.info("registered account", extra={"account_id": account.id})

        # a new account is logged in straight away
        session_storage.put(account, store=self._store)
        return AuthResult(success=True, user=account)

    def current_user(self) -> UserAccount | None:
        return session_storage.get(store=self._store)

    def logout(self) -> None:
        session_storage.clear(store=self._store)

    def verify_password(self, account: UserAccount, password: str) -> bool:
        """Verify an account's password."""
        if account.password_hash is None:
            return False

        return bcrypt.checkpw(
            password.encode("utf-8"),
            account.password_hash.encode("utf-8"),
        )

    def _hash_password(self, password: str) -> str:
        """Hash a password using bcrypt."""
        salt = bcrypt.gensalt()
        hashed = bcrypt.hashpw(password.encode("utf-8"), salt)
        return hashed.decode("utf-8")
