"""CLI commands for inspecting and checking KPI rubrics."""

from __future__ import annotations

from pathlib import Path

import yaml

import boilerkpi.lib.cli as click
from boilerkpi.core import di
from boilerkpi.model import RatingLevel, Rubric
from boilerkpi.report import format_number
from boilerkpi.rubric import DEFAULT_RUBRIC_PATH, parse_rubric, RubricError, short_name


@click.group("rubric")
def rubric():
    """Inspect the KPI rubric."""
    ...


@rubric.command("show")
@click.option("--criteria/--no-criteria", default=False, help="Also print each item's rating criteria")
@di.inject
def rubric_show(criteria: bool, rubric: Rubric = di.Provide["rubric"]) -> None:
    """Print the categories and items of the configured rubric."""
    total = sum((item.max_points for category in rubric for item in category.items), start=0)
    for category in rubric:
        category_max = sum((item.max_points for item in category.items), start=0)
        click.echo(f"{category.name} [{short_name(category)}] ({format_number(category_max)} điểm)")
        for item in category.items:
            unit = f" {item.unit}" if item.unit else ""
            click.echo(f"  {item.code} {item.name}: {format_number(item.max_points)}{unit}")
            if criteria:
                for level in RatingLevel:
                    c = item.criteria[level]
                    click.echo(f"      {level.value:<8} {c.label} ({format_number(c.score_percent * 100)}%)")
    click.echo(f"Tổng: {format_number(total)} điểm")


@rubric.command("validate")
@click.argument(
    "path",
    required=False,
    default=DEFAULT_RUBRIC_PATH,
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
)
def rubric_validate(path: Path) -> None:
    """Check the structure of a rubric YAML file.

    PATH defaults to the rubric bundled with the package.
    """
    with path.open(encoding="utf8") as f:
        data = yaml.safe_load(f)

    try:
        parse_rubric(data)
    except RubricError as e:
        for error in e.errors:
            click.echo(f"Error: {error}", err=True)
        raise SystemExit(1)

    click.echo(f"{path}: OK")
