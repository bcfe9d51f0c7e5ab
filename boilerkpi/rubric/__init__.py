__all__ = [
    "CATEGORY_SHORT_NAMES",
    "CATEGORY_STYLES",
    "CategoryStyle",
    "DEFAULT_RUBRIC_PATH",
    "RubricError",
    "category_style",
    "load_rubric",
    "parse_rubric",
    "short_name",
    "validate_kpi_data",
]

from .errors import RubricError
from .labels import CATEGORY_SHORT_NAMES, CATEGORY_STYLES, category_style, CategoryStyle, short_name
from .loader import DEFAULT_RUBRIC_PATH, load_rubric, parse_rubric
from .validation import validate_kpi_data
