import decimal

from .base import FrozenModel
from .enum import Ranking


class CategoryScore(FrozenModel):
    points: decimal.Decimal
    max_points: decimal.Decimal


class CategoryBreakdown(FrozenModel):
    category_id: str
    category_name: str
    points: decimal.Decimal
    max_points: decimal.Decimal


class TotalScore(FrozenModel):
    total_points: decimal.Decimal
    total_max: decimal.Decimal
    percent: decimal.Decimal
    breakdown: tuple[CategoryBreakdown, ...] = ()


class CategoryScoreResult(FrozenModel):
    id: str
    name: str
    short_name: str
    score: decimal.Decimal
    max: decimal.Decimal
    percentage: decimal.Decimal


class ScoreSummary(FrozenModel):
    categories: tuple[CategoryScoreResult, ...]
    total_points: decimal.Decimal
    total_max: decimal.Decimal
    percent: decimal.Decimal
    ranking: Ranking
