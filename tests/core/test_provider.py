"""Tests for LoggingProvider."""

from __future__ import annotations

import logging
import typing as t
import warnings

import pytest

from boilerkpi.core import LoggingProvider

MINIMAL_CONFIG: dict[str, t.Any] = {"version": 1, "disable_existing_loggers": False}


@pytest.fixture
def restore_warnings_capture() -> t.Generator[None]:
    yield
    logging.captureWarnings(False)


class TestLoggingProvider(object):
    def test_registers_trace_level(self) -> None:
        LoggingProvider(MINIMAL_CONFIG, debug=False)

        assert logging.getLevelName(5) == "TRACE"

    def test_logger_is_named_after_calling_module(self) -> None:
        assert LoggingProvider.get_logger().name == __name__
        assert LoggingProvider.get_logger("boilerkpi.x").name == "boilerkpi.x"

    @pytest.mark.usefixtures("restore_warnings_capture")
    def test_debug_routes_warnings_to_logging(self, caplog: pytest.LogCaptureFixture) -> None:
        LoggingProvider(MINIMAL_CONFIG, debug=True)

        with caplog.at_level(logging.WARNING, logger="py.warnings"):
            warnings.showwarning("deprecated rubric key", UserWarning, __file__, 1)

        assert "deprecated rubric key" in caplog.text
