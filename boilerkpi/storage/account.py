from __future__ import annotations

import logging
import random

import pydantic as p

from boilerkpi.core import di
from boilerkpi.model import UserAccount

from .store import KeyValueStore

logger = logging.getLogger(__name__)

USERS_KEY = "boiler_kpi_users_db"

_accounts = p.TypeAdapter(list[UserAccount])


def find(*, store: KeyValueStore = di.Provide["storage.store"]) -> tuple[UserAccount, ...]:
    """Return every stored account; malformed data reads as no accounts."""
    raw = store.get(USERS_KEY)
    if raw is None:
        return ()
    try:
        return tuple(_accounts.validate_json(raw))
    except p.ValidationError as e:
        logger.warning("ignoring malformed account data", extra={"key": USERS_KEY, "errors": e.error_count()})
        return ()


def get(username: str, *, store: KeyValueStore = di.Provide["storage.store"]) -> UserAccount | None:
    """Get an account by username, ignoring case."""
    wanted = username.lower()
    for account in find(store=store):
        if account.username.lower() == wanted:
            return account
    return None


def save_all(accounts: list[UserAccount], *, store: KeyValueStore = di.Provide["storage.store"]) -> None:
    store.set(USERS_KEY, _accounts.dump_json(accounts).decode("utf8"))


def generate_id(taken: set[str]) -> str:
    while True:
        candidate = f"NV-{random.randint(1000, 9999)}"
        if candidate not in taken:
            return candidate


def create(
    *,
    username: str,
    password_hash: str,
    full_name: str,
    role: str = "",
    department: str = "",
    avatar: str | None = None,
    store: KeyValueStore = di.Provide["storage.store"],
) -> UserAccount:
    """Append a new account to the stored list and return it."""
    accounts = list(find(store=store))
    account = UserAccount(
        id=generate_id({a.id for a in accounts}),
        username=username,
        password_hash=password_hash,
        full_name=full_name,
        role=role,
        department=department,
        avatar=avatar,
    )
    accounts.append(account)
    save_all(accounts, store=store)
    return account
