__all__ = [
    "MissingCriterionError",
    "UNRATED_LEVEL",
    "calculate_category_score",
    "calculate_item_score",
    "calculate_total_score",
    "category_results",
    "percentage",
    "rank",
    "round2",
    "summarize",
]

from .engine import calculate_category_score, calculate_item_score, calculate_total_score, category_results, \
    percentage, rank, round2, summarize, UNRATED_LEVEL
from .errors import MissingCriterionError
