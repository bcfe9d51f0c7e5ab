"""The `logging` section, a `logging.config.dictConfig` schema.

Fields whose dictConfig key is not a Python identifier (`()`, `class`) are
declared by alias; Settings dumps by alias, so the dumped section can be
handed to dictConfig as is.
"""

import typing as t

import pydantic as p

from .base import BaseSettings

# logging's own names plus TRACE, which LoggingProvider registers
LogLevel = t.Literal["NOTSET", "TRACE", "DEBUG", "INFO", "WARNING", "WARN", "ERROR", "FATAL", "CRITICAL"]


class FormatterSettings(BaseSettings):
    factory: t.Literal["boilerkpi.lib.logging.ExtraFormatter"] = p.Field(alias="()")
    base: str
    format: str | None = None
    datefmt: str | None = None
    log_colors: dict[str, str]
    no_color: bool = False
    indent: bool | None = None


class HandlerSettings(BaseSettings):
    class_: t.Literal["colorlog.StreamHandler"] = p.Field(alias="class")
    formatter: str
    level: LogLevel
    stream: str = "ext://sys.stderr"


class LoggerSettings(BaseSettings):
    level: LogLevel = "NOTSET"
    propagate: bool = True
    handlers: list[str] | None = None


class RootLoggerSettings(BaseSettings):
    handlers: list[str]
    level: LogLevel = "NOTSET"


class LoggingSettings(BaseSettings):
    version: t.Literal[1]
    disable_existing_loggers: bool = True
    formatters: dict[str, FormatterSettings]
    handlers: dict[str, HandlerSettings]
    root: RootLoggerSettings
    loggers: dict[str, LoggerSettings] = {}
