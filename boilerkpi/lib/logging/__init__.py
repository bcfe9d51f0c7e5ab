__all__ = [
    "ExtraFormatter",
    "LogStyle",
]

from .extra import ExtraFormatter
from .style import LogStyle
