from __future__ import annotations

import datetime
import logging
import typing as t

from boilerkpi.model import EmployeeInfo, EvaluationState, ItemEvaluation, KPIItem, RatingLevel, Rubric, \
    ScoreSummary
from boilerkpi.scoring import calculate_item_score, summarize

logger = logging.getLogger(__name__)


def current_period(today: datetime.date | None = None) -> str:
    """Report month in ``YYYY-MM`` form."""
    return (today or datetime.date.today()).strftime("%Y-%m")


class EvaluationSession(object):
    """The mutable state of one evaluation: ratings, notes, employee and period.

    Scores are never cached; ``summary()`` recomputes them from the rubric and
    the current ratings on every call.
    """

    rubric: Rubric
    state: EvaluationState
    employee: EmployeeInfo
    period: str

    def __init__(self, rubric: Rubric, employee: EmployeeInfo | None = None, period: str | None = None) -> None:
        self.rubric = rubric
        self.state = {}
        self.employee = employee or EmployeeInfo()
        self.period = period or current_period()
        self._items: dict[str, KPIItem] = {item.id: item for category in rubric for item in category.items}

    def item(self, item_id: str) -> KPIItem:
        try:
            return self._items[item_id]
        except KeyError:
            raise KeyError(f"unknown KPI item {item_id!r}") from None

    def rate(self, item_id: str, level: RatingLevel) -> ItemEvaluation:
        """Record a rating, keeping any note already entered for the item."""
        item = self.item(item_id)
        previous = self.state.get(item_id)
        entry = ItemEvaluation(
            level=level,
            actual_score=calculate_item_score(item, level),
            notes=previous.notes if previous else "",
        )
        self.state[item_id] = entry
        logger.debug("rated item", extra={"item_id": item_id, "level": level, "score": entry.actual_score})
        return entry

    def note(self, item_id: str, notes: str) -> ItemEvaluation:
        """Set the note for an item without touching its rating."""
        self.item(item_id)
        previous = self.state.get(item_id) or ItemEvaluation()
        entry = previous.model_copy(update={"notes": notes})
        self.state[item_id] = entry
        return entry

    def update_employee(self, **fields: t.Any) -> EmployeeInfo:
        self.employee = EmployeeInfo.model_validate({**self.employee.model_dump(), **fields})
        return self.employee

    def is_rated(self, item_id: str) -> bool:
        entry = self.state.get(item_id)
        return entry is not None and entry.level is not None

    def summary(self) -> ScoreSummary:
        return summarize(self.rubric, self.state)

    def reset(self) -> None:
        """Drop all ratings and the employee's identity; the report date is kept."""
        self.state.clear()
        self.employee = EmployeeInfo(report_date=self.employee.report_date)
        logger.debug("reset evaluation session")
