from __future__ import annotations

import importlib
import sys
import traceback
import types
import typing as t
from pathlib import Path

import pydantic as p

import boilerkpi
import boilerkpi.lib.cli as click
from boilerkpi.core import BoilerKPIContainer, di
from boilerkpi.model import DeploymentEnvironment

PROJECT_ROOT = Path(boilerkpi.__file__).resolve().parents[1]
COMMANDS = ("evaluate", "rubric", "user")

# command modules imported so far; the container wires them at boot
_loaded: list[types.ModuleType] = []
_booted = False


class LazyCommandGroup(click.Group):
    """Imports `boilerkpi.cli.<name>` only when that command is invoked."""

    def list_commands(self, ctx: click.Context) -> list[str]:
        return list(COMMANDS)

    def get_command(self, ctx: click.Context, cmd_name: str) -> click.Command | None:
        if cmd_name not in COMMANDS:
            return None
        mod = importlib.import_module(f"boilerkpi.cli.{cmd_name}")
        _loaded.append(mod)
        return getattr(mod, cmd_name)


@click.group(cls=LazyCommandGroup)
@click.option("-E", "--env", default=DeploymentEnvironment.Local, type=click.EnumType(DeploymentEnvironment))
@click.option("-c", "--config-root", default=PROJECT_ROOT / "config", type=click.DirectoryURLType())
@click.option(
    "-o",
    "--override",
    multiple=True,
    help="override one configuration value by its dotted path, e.g., -o storage.backend=memory",
)
@click.option("-D", "--debug", is_flag=True, default=False, help="print tracebacks and route warnings to logging")
@click.pass_obj
@di.inject
def main(
    ct: BoilerKPIContainer,
    env: DeploymentEnvironment,
    config_root: p.FileUrl,
    override: tuple[str, ...],
    debug: bool,
):
    """Evaluate boiler shift managers against the KPI rubric."""
    global _booted
    BoilerKPIContainer.boot(
        ct,
        debug=debug,
        env=env,
        config_root=config_root,
        override=override,
        wiring=tuple(_loaded),
    )
    _booted = True


def _wants_traceback(container: BoilerKPIContainer, args: list[str]) -> bool:
    # before boot the container cannot say whether -D was given
    if _booted:
        return container.debug()
    return "-D" in args or "--debug" in args


def execute_command(*_args: str) -> None:
    """Console entry point: run `main` and turn its outcome into an exit status."""
    args = list(_args or sys.argv)
    prog, args = Path(args[0]).name, args[1:]
    container = BoilerKPIContainer()

    try:
        with main.make_context(prog, args=args) as ctx:
            ctx.obj = container
            sys.exit(t.cast(int | None, main.invoke(ctx)) or 0)
    except (EOFError, KeyboardInterrupt, click.Abort):
        click.echo("Aborted!", file=sys.stderr)
        sys.exit(1)
    except click.exceptions.Exit as ex:
        sys.exit(ex.exit_code)
    except click.ClickException as ex:
        ex.show()
        sys.exit(ex.exit_code)
    except Exception as ex:
        click.echo(click.style("ERROR ", fg="red") + str(ex), file=sys.stderr)
        if _wants_traceback(container, args):
            traceback.print_exc()
        sys.exit(-1)
    finally:
        container.shutdown_resources()


if __name__ == "__main__":
    execute_command(*sys.argv)
