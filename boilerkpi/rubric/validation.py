"""Pre-flight diagnostics for rubric data.

Validation never raises: every structural problem found is reported as a
human-readable message and the caller decides whether to block usage.
"""

from __future__ import annotations

import decimal
import enum
import typing as t

import pydantic as p

import boilerkpi.lib.json as json
from boilerkpi.model import RatingLevel


def _as_mapping(obj: t.Any) -> t.Mapping[t.Any, t.Any] | None:
    if isinstance(obj, p.BaseModel):
        return obj.model_dump(mode="python")
    if isinstance(obj, t.Mapping):
        return t.cast(t.Mapping[t.Any, t.Any], obj)
    return None


def _describe(obj: t.Mapping[t.Any, t.Any]) -> str:
    shallow = {k: v for k, v in obj.items() if k not in {"items", "criteria", "checklist"}}
    return json.dumps(shallow, ensure_ascii=False, sort_keys=True)


def _level_key(key: t.Any) -> str:
    return key.value if isinstance(key, enum.Enum) else str(key)


def _is_number(v: t.Any) -> bool:
    return isinstance(v, (int, float, decimal.Decimal)) and not isinstance(v, bool)


def _validate_item(item: t.Any, errors: list[str]) -> None:
    m = _as_mapping(item)
    if m is None:
        errors.append(f"Item is not a mapping: {item!r}")
        return

    item_id = m.get("id")
    if not item_id or not m.get("code") or not m.get("name"):
        errors.append(f"Item missing core fields: {_describe(m)}")

    max_points = m.get("max_points")
    if not _is_number(max_points) or max_points <= 0:
        errors.append(f"Item {item_id} invalid max_points")

    criteria = _as_mapping(m.get("criteria")) or {}
    present = {_level_key(k) for k in criteria}
    missing = [level.value for level in RatingLevel if level.value not in present]
    if missing:
        errors.append(f"Item {item_id} missing criteria keys: {','.join(missing)}")

    known = {level.value for level in RatingLevel}
    unknown = sorted(k for k in present if k not in known)
    if unknown:
        errors.append(f"Item {item_id} unknown criteria keys: {','.join(unknown)}")

    for key, criterion in criteria.items():
        cm = _as_mapping(criterion) or {}
        for field in ("label", "description"):
            if not isinstance(cm.get(field), str):
                errors.append(f"Item {item_id} criterion {_level_key(key)} missing {field}")
        score_percent = cm.get("score_percent")
        if not _is_number(score_percent) or not 0 <= score_percent <= 1:
            errors.append(f"Item {item_id} criterion {_level_key(key)} score_percent must be within [0, 1]")


def validate_kpi_data(rubric: t.Any) -> list[str]:
    """Return every structural problem in ``rubric``; an empty list means well-formed.

    Accepts raw data as loaded from YAML (lists and dicts) or model instances.
    """
    errors: list[str] = []
    if isinstance(rubric, (str, bytes)) or not isinstance(rubric, t.Sequence) or len(rubric) == 0:
        errors.append("KPI data must be a non-empty sequence")
        return errors

    for category in t.cast(t.Sequence[t.Any], rubric):
        c = _as_mapping(category)
        if c is None:
            errors.append(f"Category is not a mapping: {category!r}")
            continue

        if not c.get("id") or not c.get("name"):
            errors.append(f"Category missing id/name: {_describe(c)}")

        items = c.get("items")
        if isinstance(items, (str, bytes)) or not isinstance(items, t.Sequence) or len(items) == 0:
            errors.append(f"Category {c.get('id')} has no items")
            continue

        for item in t.cast(t.Sequence[t.Any], items):
            _validate_item(item, errors)

    return errors
