"""Tests for the JSON encoder, CLI parameter types and the log formatter."""

from __future__ import annotations

import datetime
import decimal
import io
import logging
from pathlib import Path

import click as stock_click
import colorlog
import pytest

import boilerkpi.lib.cli as click
import boilerkpi.lib.json as json
from boilerkpi.lib.logging import ExtraFormatter
from boilerkpi.model import ItemEvaluation, RatingLevel


class TestJSON(object):
    """Tests for the project JSON encoder."""

    def test_encodes_project_types(self) -> None:
        encoded = json.dumps(
            {
                "score": decimal.Decimal("8.50"),
                "date": datetime.date(2025, 11, 30),
                "level": RatingLevel.Good,
                "path": Path("/tmp/report.html"),
                "entry": ItemEvaluation(level=RatingLevel.Average, actual_score=decimal.Decimal("7.00")),
            },
            sort_keys=True,
        )

        assert json.loads(encoded) == {
            "date": "2025-11-30",
            "entry": {"level": "AVERAGE", "actual_score": "7.00", "notes": ""},
            "level": "GOOD",
            "path": "/tmp/report.html",
            "score": "8.50",
        }

    def test_unknown_types_still_fail(self) -> None:
        with pytest.raises(TypeError):
            json.dumps({"x": object()})


class TestParamTypes(object):
    """Tests for the extra click parameter types."""

    def test_enum_type_ignores_case(self) -> None:
        param = click.EnumType(RatingLevel)

        assert param.convert("good", None, None) is RatingLevel.Good
        assert param.convert("AVERAGE", None, None) is RatingLevel.Average
        assert param.convert(RatingLevel.Weak, None, None) is RatingLevel.Weak

    def test_enum_type_rejects_unknown(self) -> None:
        with pytest.raises(stock_click.BadParameter):
            click.EnumType(RatingLevel).convert("EXCELLENT", None, None)

    def test_pair_type(self) -> None:
        param = click.PairParamType(click.EnumType(RatingLevel))

        assert param.convert("1.1 = weak", None, None) == ("1.1", RatingLevel.Weak)
        assert click.PairParamType().convert("1.1=a=b", None, None) == ("1.1", "a=b")

    @pytest.mark.parametrize("value", ["1.1", "=GOOD"])
    def test_pair_type_rejects_malformed(self, value: str) -> None:
        with pytest.raises(stock_click.BadParameter):
            click.PairParamType().convert(value, None, None)

    def test_directory_type_promotes_paths(self, tmp_path: Path) -> None:
        url = click.DirectoryURLType().convert(str(tmp_path), None, None)

        assert url.scheme == "file"
        assert url.path == str(tmp_path.absolute())
        assert click.DirectoryURLType().convert(f"file://{tmp_path}", None, None) == url

    def test_directory_type_requires_a_directory(self, tmp_path: Path) -> None:
        (tmp_path / "logging.yaml").write_text("version: 1\n", encoding="utf8")

        for value in (tmp_path / "missing", tmp_path / "logging.yaml"):
            with pytest.raises(stock_click.BadParameter):
                click.DirectoryURLType().convert(str(value), None, None)


class TestExtraFormatter(object):
    """Tests for ExtraFormatter."""

    def _logger(self, stream: io.StringIO, **kwargs: bool) -> logging.Logger:
        handler = logging.StreamHandler(stream)
        handler.setFormatter(ExtraFormatter(colorlog.ColoredFormatter, "%(levelname)s %(message)s", **kwargs))
        logger = logging.getLogger(f"boilerkpi.tests.extra.{id(stream)}")
        logger.handlers = [handler]
        logger.propagate = False
        logger.setLevel(logging.INFO)
        return logger

    def test_appends_extra_as_json(self) -> None:
        stream = io.StringIO()
        logger = self._logger(stream, indent=False, no_color=True)

        logger.info("rated item", extra={"item_id": "1.1", "score": decimal.Decimal("7.00")})

        assert stream.getvalue().strip() == 'INFO rated item {"item_id": "1.1", "score": "7.00"}'

    def test_without_extra(self) -> None:
        stream = io.StringIO()
        logger = self._logger(stream, no_color=True)

        logger.warning("plain")

        assert stream.getvalue().strip() == "WARNING plain"

    def test_multiline_messages_are_indented(self) -> None:
        stream = io.StringIO()
        logger = self._logger(stream, no_color=True)

        logger.info("first\nsecond")

        assert stream.getvalue().splitlines() == ["INFO first", "     second"]
