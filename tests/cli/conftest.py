from __future__ import annotations

import os
import typing as t
from pathlib import Path

import pytest
from click.testing import CliRunner, Result

import boilerkpi
from boilerkpi.cli.__main__ import main
from boilerkpi.core import BoilerKPIContainer

CONFIG_ROOT = Path(os.path.dirname(boilerkpi.__file__)).parent / "config"


class Invoke(t.Protocol):
    def __call__(self, *args: str, input: str | None = None) -> Result: ...


@pytest.fixture
def cli_container() -> t.Generator[BoilerKPIContainer]:
    """A container shared by every invocation within one test, so stored state carries over."""
    ct = BoilerKPIContainer()
    yield ct
    ct.shutdown_resources()


@pytest.fixture
def invoke(cli_container: BoilerKPIContainer) -> Invoke:
    """Run the CLI in the Test environment."""
    runner = CliRunner()

    def _invoke(*args: str, input: str | None = None) -> Result:
        return runner.invoke(
            main,
            ["-E", "test", "-c", str(CONFIG_ROOT), *args],
            obj=cli_container,
            input=input,
        )

    return _invoke
