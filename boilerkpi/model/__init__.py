__all__ = [
    # Base
    "BaseModel",
    "FrozenModel",
    # Enums
    "DeploymentEnvironment",
    "Ranking",
    "RatingLevel",
    "Theme",
    # Rubric
    "Criterion",
    "KPICategory",
    "KPIItem",
    "Rubric",
    # Evaluation
    "EmployeeInfo",
    "EvaluationState",
    "ItemEvaluation",
    # Scores
    "CategoryBreakdown",
    "CategoryScore",
    "CategoryScoreResult",
    "ScoreSummary",
    "TotalScore",
    # Users
    "UserAccount",
]

from .base import BaseModel, FrozenModel
from .enum import DeploymentEnvironment, Ranking, RatingLevel, Theme
from .evaluation import EmployeeInfo, EvaluationState, ItemEvaluation
from .rubric import Criterion, KPICategory, KPIItem, Rubric
from .score import CategoryBreakdown, CategoryScore, CategoryScoreResult, ScoreSummary, TotalScore
from .user import UserAccount
