__all__ = [
    "EvaluationSession",
    "current_period",
]

from .session import current_period, EvaluationSession
