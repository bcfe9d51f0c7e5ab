import decimal
import typing as t

import pydantic as p

from .base import FrozenModel
from .enum import RatingLevel


class Criterion(FrozenModel):
    label: str
    description: str
    # fraction of the item's max_points awarded at this level
    score_percent: t.Annotated[decimal.Decimal, p.Field(ge=0, le=1)]


class KPIItem(FrozenModel):
    id: str
    code: str
    name: str
    max_points: t.Annotated[decimal.Decimal, p.Field(gt=0)]
    unit: str | None = None
    checklist: tuple[str, ...] = ()
    criteria: dict[RatingLevel, Criterion]


class KPICategory(FrozenModel):
    id: str
    name: str
    items: t.Annotated[tuple[KPIItem, ...], p.Field(min_length=1)]


Rubric = tuple[KPICategory, ...]
