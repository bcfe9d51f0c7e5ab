from __future__ import annotations

import logging
import typing as t
from pathlib import Path

import pydantic as p
import yaml

from boilerkpi.model import Rubric

from .errors import RubricError
from .validation import validate_kpi_data

logger = logging.getLogger(__name__)

DEFAULT_RUBRIC_PATH = Path(__file__).parent / "data" / "boiler_shift_manager.yaml"

_rubric_adapter: p.TypeAdapter[Rubric] = p.TypeAdapter(Rubric)


def parse_rubric(data: t.Any) -> Rubric:
    """Validate raw rubric data and build the immutable rubric from it."""
    errors = validate_kpi_data(data)
    if errors:
        raise RubricError(errors)
    try:
        return _rubric_adapter.validate_python(data)
    except p.ValidationError as e:
        raise RubricError([f"{'.'.join(str(loc) for loc in err['loc'])}: {err['msg']}" for err in e.errors()]) from e


def load_rubric(path: str | Path | None = None) -> Rubric:
    path = Path(path) if path is not None else DEFAULT_RUBRIC_PATH
    with path.open(encoding="utf8") as f:
        data = yaml.safe_load(f)

    rubric = parse_rubric(data)
    logger.info(
        "loaded rubric",
        extra={
            "path": path,
            "categories": len(rubric),
            "items": sum(len(c.items) for c in rubric),
        },
    )
    return rubric
