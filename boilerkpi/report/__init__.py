__all__ = [
    "DEFAULT_TEMPLATE_DIR",
    "create_environment",
    "format_number",
    "generate_text_report",
    "load_logo",
    "render_printable_report",
]

from .format import format_number
from .printable import create_environment, DEFAULT_TEMPLATE_DIR, load_logo, render_printable_report
from .text import generate_text_report
