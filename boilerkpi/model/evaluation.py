import datetime
import decimal

import pydantic as p

from .base import BaseModel
from .enum import RatingLevel


class ItemEvaluation(BaseModel):
    """One entry of an evaluation; ``level`` is unset when only a note was entered."""

    level: RatingLevel | None = None
    actual_score: decimal.Decimal | None = None
    notes: str = ""


EvaluationState = dict[str, ItemEvaluation]


class EmployeeInfo(BaseModel):
    model_config = p.ConfigDict(extra="forbid")

    name: str = ""
    employee_id: str = ""
    position: str = ""
    department: str = ""
    report_date: datetime.date = p.Field(default_factory=datetime.date.today)
