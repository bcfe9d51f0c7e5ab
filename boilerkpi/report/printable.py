"""Printable (print-to-PDF ready) HTML report."""

from __future__ import annotations

import base64
import decimal
import logging
import mimetypes
import typing as t
from pathlib import Path

import jinja2

import boilerkpi.lib.json
from boilerkpi.core.config import ReportSettings
from boilerkpi.evaluation import EvaluationSession
from boilerkpi.model import Criterion, ItemEvaluation, KPIItem, UserAccount
from boilerkpi.rubric.labels import category_style
from boilerkpi.scoring import calculate_item_score
from boilerkpi.scoring.engine import rating_for

from .format import format_date, format_number, format_period

logger = logging.getLogger(__name__)

DEFAULT_TEMPLATE_DIR = Path(__file__).parent / "template"
TEMPLATE_NAME = "report.html"


class ItemRow(t.NamedTuple):
    item: KPIItem
    entry: ItemEvaluation | None
    criterion: Criterion
    score: decimal.Decimal
    # True when the score comes from the unrated-item default, not a rating
    defaulted: bool


def create_environment(template_dir: Path) -> jinja2.Environment:
    env = jinja2.Environment(
        loader=jinja2.FileSystemLoader(template_dir),
        autoescape=jinja2.select_autoescape(["html", "xml"]),
    )
    env.policies.update({
        "json.dumps_function": boilerkpi.lib.json.dumps,
    })
    env.filters.update({
        "number": format_number,
        "period": format_period,
        "date": format_date,
    })
    return env


def load_logo(path: str | Path) -> str:
    """Read an image file into a ``data:`` URI suitable for embedding."""
    path = Path(path)
    content_type, _ = mimetypes.guess_type(path.name)
    if content_type is None or not content_type.startswith("image/"):
        raise ValueError(f"{path}: not an image file")
    data = base64.b64encode(path.read_bytes()).decode("ascii")
    return f"data:{content_type};base64,{data}"


def _item_rows(session: EvaluationSession, items: t.Iterable[KPIItem]) -> list[ItemRow]:
    rows: list[ItemRow] = []
    for item in items:
        level = rating_for(item, session.state)
        rows.append(
            ItemRow(
                item=item,
                entry=session.state.get(item.id),
                criterion=item.criteria[level],
                score=calculate_item_score(item, level),
                defaulted=not session.is_rated(item.id),
            )
        )
    return rows


def render_printable_report(
    session: EvaluationSession,
    env: jinja2.Environment,
    *,
    settings: ReportSettings | None = None,
    evaluator: UserAccount | None = None,
    logo: str | None = None,
) -> str:
    settings = settings or ReportSettings()
    summary = session.summary()
    sections = [
        {
            "result": result,
            "style": category_style(category.id),
            "rows": _item_rows(session, category.items),
        }
        for category, result in zip(session.rubric, summary.categories)
    ]

    template = env.get_template(TEMPLATE_NAME)
    html = template.render(
        settings=settings,
        summary=summary,
        sections=sections,
        employee=session.employee,
        period=session.period,
        evaluator=evaluator,
        logo=logo,
    )
    logger.info(
        "rendered printable report",
        extra={"employee_id": session.employee.employee_id, "period": session.period, "percent": summary.percent},
    )
    return html
