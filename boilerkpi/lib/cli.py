from __future__ import annotations

import enum
import pathlib
import typing as t

import click
import pydantic as p
from click import *  # noqa: F401, F403 # pyright: ignore [reportWildcardImportFromLibrary]

# Commands import this module as `click`, getting the stock API plus the
# parameter types below.

E = t.TypeVar("E", bound=enum.Enum)


class EnumType(click.ParamType, t.Generic[E]):
    """A member of `enum`, matched on its value without regard to case."""

    def __init__(self, enum: type[E]):
        self.enum = enum
        self.name = enum.__name__
        self.choices = {str(member.value).lower(): member for member in enum}

    def convert(self, value: str | E | None, param: click.Parameter | None, ctx: click.Context | None) -> E | None:
        if value is None or isinstance(value, self.enum):
            return value
        try:
            return self.choices[str(value).lower()]
        except KeyError:
            self.fail(f"{value!r} is not one of {', '.join(str(m.value) for m in self.enum)}", param, ctx)

    def __repr__(self) -> str:
        return self.name


class PairParamType(click.ParamType):
    """
    Accept `KEY=VALUE` pairs, converting the value with an optional inner
    param type; yields a `(key, value)` tuple
    """

    name = "KEY=VALUE"

    def __init__(self, value_type: click.ParamType | None = None):
        self.value_type = value_type

    def convert(
        self, value: str | tuple[str, t.Any], param: click.Parameter | None, ctx: click.Context | None
    ) -> tuple[str, t.Any]:
        if isinstance(value, tuple):
            return value

        if "=" not in value:
            self.fail(f"{value!r} is not a KEY=VALUE pair", param, ctx)
        k, v = [s.strip() for s in value.split("=", 1)]
        if not k:
            self.fail(f"{value!r} has an empty key", param, ctx)
        if self.value_type is not None:
            return k, self.value_type.convert(v, param, ctx)
        return k, v


class DirectoryURLType(click.ParamType):
    """An existing local directory, given as a path or a `file://` URL."""

    name = "DIRECTORY"

    def convert(
        self, value: str | pathlib.Path | p.FileUrl, param: click.Parameter | None, ctx: click.Context | None
    ) -> p.FileUrl:
        if isinstance(value, p.AnyUrl):
            if value.scheme != "file" or value.path is None:
                self.fail(f"{value}: not a local directory", param, ctx)
            value = value.path
        elif isinstance(value, str) and value.startswith("file://"):
            value = value.removeprefix("file://")

        path = pathlib.Path(value).absolute()
        if not path.is_dir():
            self.fail(f"{value}: no such directory", param, ctx)
        return p.FileUrl(f"file://{path}")
