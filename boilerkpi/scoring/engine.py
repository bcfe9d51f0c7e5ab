"""Scoring engine.

Pure functions from a rubric and a sparse set of ratings to item, category
and total scores. Every function here recomputes from its inputs; nothing is
cached between calls.

An item with no rating recorded (absent from ``ratings``, or present with
only a note) is scored at the ``WEAK`` level. Every call site, including
the per-category display results, uses this same policy.
"""

from __future__ import annotations

import decimal
import typing as t

from boilerkpi.model import CategoryBreakdown, CategoryScore, CategoryScoreResult, ItemEvaluation, KPICategory, \
    KPIItem, Ranking, RatingLevel, Rubric, ScoreSummary, TotalScore
from boilerkpi.rubric.labels import short_name

from .errors import MissingCriterionError

UNRATED_LEVEL: t.Final = RatingLevel.Weak

EXCELLENT_THRESHOLD: t.Final = decimal.Decimal(90)
SATISFACTORY_THRESHOLD: t.Final = decimal.Decimal(70)

_CENTS = decimal.Decimal("0.01")
_ZERO = decimal.Decimal(0)
_HUNDRED = decimal.Decimal(100)

Ratings = t.Mapping[str, RatingLevel | ItemEvaluation]


def round2(value: decimal.Decimal) -> decimal.Decimal:
    """Round to 2 decimal places, halves away from zero."""
    return value.quantize(_CENTS, rounding=decimal.ROUND_HALF_UP)


def percentage(points: decimal.Decimal, max_points: decimal.Decimal) -> decimal.Decimal:
    if max_points <= 0:
        return _ZERO
    return round2(points / max_points * _HUNDRED)


def rating_for(item: KPIItem, ratings: Ratings) -> RatingLevel:
    entry = ratings.get(item.id)
    if isinstance(entry, ItemEvaluation):
        entry = entry.level
    return entry if entry is not None else UNRATED_LEVEL


def calculate_item_score(item: KPIItem, rating: RatingLevel) -> decimal.Decimal:
    criterion = item.criteria.get(rating)
    if criterion is None:
        raise MissingCriterionError(item.id, rating)
    return round2(item.max_points * criterion.score_percent)


def calculate_category_score(category: KPICategory, ratings: Ratings) -> CategoryScore:
    points = _ZERO
    max_points = _ZERO
    for item in category.items:
        points += calculate_item_score(item, rating_for(item, ratings))
        max_points += item.max_points
    return CategoryScore(points=round2(points), max_points=max_points)


def calculate_total_score(rubric: Rubric, ratings: Ratings) -> TotalScore:
    total_points = _ZERO
    total_max = _ZERO
    breakdown: list[CategoryBreakdown] = []

    for category in rubric:
        result = calculate_category_score(category, ratings)
        breakdown.append(
            CategoryBreakdown(
                category_id=category.id,
                category_name=category.name,
                points=result.points,
                max_points=result.max_points,
            )
        )
        total_points += result.points
        total_max += result.max_points

    total_points = round2(total_points)
    return TotalScore(
        total_points=total_points,
        total_max=total_max,
        percent=percentage(total_points, total_max),
        breakdown=tuple(breakdown),
    )


def rank(percent: decimal.Decimal | int | float | str) -> Ranking:
    """Map a total percent to its ranking bucket; lower bounds are inclusive."""
    percent = decimal.Decimal(str(percent)) if not isinstance(percent, decimal.Decimal) else percent
    if percent == 0:
        return Ranking.Unranked
    if percent >= EXCELLENT_THRESHOLD:
        return Ranking.Excellent
    if percent >= SATISFACTORY_THRESHOLD:
        return Ranking.Satisfactory
    return Ranking.Unsatisfactory


def category_results(rubric: Rubric, ratings: Ratings) -> list[CategoryScoreResult]:
    results: list[CategoryScoreResult] = []
    for category in rubric:
        score = calculate_category_score(category, ratings)
        results.append(
            CategoryScoreResult(
                id=category.id,
                name=category.name,
                short_name=short_name(category),
                score=score.points,
                max=score.max_points,
                percentage=percentage(score.points, score.max_points),
            )
        )
    return results


def summarize(rubric: Rubric, ratings: Ratings) -> ScoreSummary:
    """Everything a display needs: per-category results, totals and the ranking."""
    total = calculate_total_score(rubric, ratings)
    return ScoreSummary(
        categories=tuple(category_results(rubric, ratings)),
        total_points=total.total_points,
        total_max=total.total_max,
        percent=total.percent,
        ranking=rank(total.percent),
    )
