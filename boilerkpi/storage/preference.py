from __future__ import annotations

import logging

from boilerkpi.core import di
from boilerkpi.model import Theme

from .store import KeyValueStore

logger = logging.getLogger(__name__)

THEME_KEY = "theme"
DEFAULT_THEME = Theme.Dark


def get_theme(*, store: KeyValueStore = di.Provide["storage.store"]) -> Theme:
    raw = store.get(THEME_KEY)
    if raw is None:
        return DEFAULT_THEME
    try:
        return Theme(raw)
    except ValueError:
        logger.warning("ignoring unknown theme preference", extra={"key": THEME_KEY, "value": raw})
        return DEFAULT_THEME


def set_theme(theme: Theme, *, store: KeyValueStore = di.Provide["storage.store"]) -> None:
    store.set(THEME_KEY, theme.value)
