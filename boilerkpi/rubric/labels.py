"""Static presentation tables keyed by category id."""

from __future__ import annotations

import re
import typing as t

from boilerkpi.model import KPICategory

CATEGORY_SHORT_NAMES: t.Final[dict[str, str]] = {
    "cat_1": "Vận hành",
    "cat_2": "An toàn",
    "cat_3": "Thiết bị",
    "cat_4": "Nhân sự",
}


class CategoryStyle(t.NamedTuple):
    icon: str
    accent: str
    background: str


DEFAULT_STYLE: t.Final = CategoryStyle(icon="eye", accent="#64748b", background="#f1f5f9")

CATEGORY_STYLES: t.Final[dict[str, CategoryStyle]] = {
    "cat_1": CategoryStyle(icon="activity", accent="#6366f1", background="#eef2ff"),
    "cat_2": CategoryStyle(icon="shield-check", accent="#10b981", background="#ecfdf5"),
    "cat_3": CategoryStyle(icon="wrench", accent="#f59e0b", background="#fffbeb"),
    "cat_4": CategoryStyle(icon="users", accent="#0ea5e9", background="#f0f9ff"),
}

_numbered = re.compile(r"^\s*\d+\.\s*")


def short_name(category: KPICategory) -> str:
    if category.id in CATEGORY_SHORT_NAMES:
        return CATEGORY_SHORT_NAMES[category.id]
    return _numbered.sub("", category.name).strip() or category.name


def category_style(category_id: str) -> CategoryStyle:
    return CATEGORY_STYLES.get(category_id, DEFAULT_STYLE)
