from __future__ import annotations

from boilerkpi.model import TotalScore

from .format import format_number


def generate_text_report(result: TotalScore) -> str:
    """Total line followed by one line per category, in rubric order."""
    lines: list[str] = [
        f"Tổng điểm: {format_number(result.total_points)}/{format_number(result.total_max)} "
        f"({format_number(result.percent)}%)",
        "Phân tích theo mục:",
    ]
    for b in result.breakdown:
        lines.append(f"- {b.category_name}: {format_number(b.points)}/{format_number(b.max_points)}")
    return "\n".join(lines)
