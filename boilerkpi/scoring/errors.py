"""Exceptions for scoring operations."""

from __future__ import annotations

from boilerkpi.model import RatingLevel


class MissingCriterionError(KeyError):
    """An item has no criterion for the requested rating level."""

    def __init__(self, item_id: str, rating: RatingLevel):
        self.item_id = item_id
        self.rating = rating
        super().__init__(f"Criterion {rating.value} not found for item {item_id}")
