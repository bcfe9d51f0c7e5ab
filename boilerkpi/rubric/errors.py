"""Exceptions for rubric operations."""

from __future__ import annotations


class RubricError(Exception):
    """Rubric data failed structural validation."""

    def __init__(self, errors: list[str]):
        self.errors = errors
        super().__init__(f"rubric has {len(errors)} problem(s): " + "; ".join(errors))
