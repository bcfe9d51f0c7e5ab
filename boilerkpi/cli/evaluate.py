"""CLI command scoring one evaluation and rendering its report."""

from __future__ import annotations

import datetime
import typing as t
from pathlib import Path

import jinja2

import boilerkpi.lib.cli as click
import boilerkpi.lib.json
from boilerkpi.auth import AuthProvider
from boilerkpi.core import di
from boilerkpi.core.config import ReportSettings
from boilerkpi.evaluation import EvaluationSession
from boilerkpi.model import RatingLevel, Rubric
from boilerkpi.report import generate_text_report, load_logo, render_printable_report
from boilerkpi.scoring import calculate_total_score


def _validate_period(ctx: click.Context, param: click.Parameter, value: str | None) -> str | None:
    if value is None:
        return None
    try:
        datetime.datetime.strptime(value, "%Y-%m")
    except ValueError:
        raise click.BadParameter(f"{value!r} is not a YYYY-MM month") from None
    return value


@click.command("evaluate")
@click.option(
    "-r",
    "--rate",
    "ratings",
    multiple=True,
    type=click.PairParamType(click.EnumType(RatingLevel)),
    help="rating for an item, e.g., -r 1.1=GOOD; unrated items score as WEAK",
)
@click.option(
    "-n", "--note", "notes", multiple=True, type=click.PairParamType(), help="note for an item, e.g., -n 1.1=ok"
)
@click.option("--name", default="", help="Employee name")
@click.option("--employee-id", default="", help="Employee id")
@click.option("--position", default=None, help="Employee position (defaults to the configured report position)")
@click.option("--department", default="", help="Employee department")
@click.option("--report-date", type=click.DateTime(formats=["%Y-%m-%d"]), default=None, help="Report date, YYYY-MM-DD")
@click.option("-m", "--month", "period", default=None, callback=_validate_period, help="Report month, YYYY-MM")
@click.option(
    "-f",
    "--format",
    "output_format",
    type=click.Choice(["text", "json", "html"]),
    default="text",
    show_default=True,
)
@click.option(
    "--logo",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    default=None,
    help="Image embedded in the header of the HTML report",
)
@click.option("-O", "--output", type=click.Path(dir_okay=False, path_type=Path), default=None)
@di.inject
def evaluate(
    ratings: tuple[tuple[str, RatingLevel], ...],
    notes: tuple[tuple[str, str], ...],
    name: str,
    employee_id: str,
    position: str | None,
    department: str,
    report_date: datetime.datetime | None,
    period: str | None,
    output_format: t.Literal["text", "json", "html"],
    logo: Path | None,
    output: Path | None,
    rubric: Rubric = di.Provide["rubric"],
    env: jinja2.Environment = di.Provide["template.report"],
    report_config: dict[str, t.Any] = di.Provide["config.report"],
    auth: AuthProvider = di.Provide["auth.provider"],
) -> None:
    """Score an evaluation and print its report."""
    settings = ReportSettings.model_validate(report_config)
    session = EvaluationSession(rubric, period=period)
    employee: dict[str, t.Any] = {
        "name": name,
        "employee_id": employee_id,
        "position": settings.position if position is None else position,
        "department": department,
    }
    if report_date is not None:
        employee["report_date"] = report_date.date()
    session.update_employee(**employee)

    try:
        for item_id, level in ratings:
            session.rate(item_id, level)
        for item_id, text in notes:
            session.note(item_id, text)
    except KeyError as e:
        raise click.UsageError(str(e.args[0])) from None

    match output_format:
        case "text":
            rendered = generate_text_report(calculate_total_score(session.rubric, session.state))
        case "json":
            rendered = boilerkpi.lib.json.dumps(
                {
                    "employee": session.employee,
                    "period": session.period,
                    "evaluations": session.state,
                    "summary": session.summary(),
                },
                ensure_ascii=False,
                indent=2,
            )
        case "html":
            rendered = render_printable_report(
                session,
                env,
                settings=settings,
                evaluator=auth.current_user(),
                logo=load_logo(logo) if logo is not None else None,
            )

    if output is None:
        click.echo(rendered)
    else:
        output.write_text(rendered + "\n", encoding="utf8")
        click.echo(f"Wrote {output_format} report to {output}")
