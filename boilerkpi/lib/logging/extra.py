"""Log formatting that appends a record's `extra=` fields as JSON."""

import inspect
import json
import logging
import string
import textwrap
import typing as t

import pygments
from pygments.formatters import Terminal256Formatter
from pygments.lexers.data import JsonLexer  # pyright: ignore [reportMissingTypeStubs]
from pygments.style import Style

from .json import JSONEncoder
from .style import LogStyle

# attributes every record carries; anything else arrived through `extra=`
RECORD_ATTRIBUTES = frozenset(vars(logging.LogRecord("", logging.NOTSET, "", 0, "", None, None))) | {
    "asctime",
    "message",
}


class ExtraFormatter(logging.Formatter):
    """
    Delegate to a base formatter (normally colorlog's) and append the
    record's extra fields, highlighted by pygments when the handler writes
    to a terminal
    """

    def __init__(
        self,
        base: type[logging.Formatter],
        format: str | None,
        datefmt: str | None = None,
        indent: bool | None = True,
        pyg_style: type[Style] = LogStyle,
        style: t.Literal["%", "{", "$"] = "%",
        validate: bool = True,
        *,
        defaults: t.Any = None,
        **kwargs: t.Any,
    ):
        self.base = base(format, datefmt=datefmt, style=style, validate=validate, defaults=defaults, **kwargs)
        self.pyg_style = pyg_style
        self.indent = 4 if indent else None
        self.no_color = bool(kwargs.get("no_color", False))
        self.stream: t.TextIO | None = None

    def format(self, record: logging.LogRecord) -> str:
        if self.stream is None:
            # the calling frame is Handler.format; its stream decides highlighting
            frame = inspect.currentframe()
            caller = frame.f_back.f_locals.get("self") if frame is not None and frame.f_back is not None else None
            if isinstance(caller, logging.StreamHandler):
                self.stream = t.cast(logging.StreamHandler[t.TextIO], caller).stream

        self._indent_continuation_lines(record)
        message = self.base.format(record)

        extra = {k: v for k, v in vars(record).items() if k not in RECORD_ATTRIBUTES}
        if not extra:
            return message

        js = json.dumps(extra, sort_keys=True, ensure_ascii=False, indent=self.indent, cls=JSONEncoder)
        if self._highlight():
            js = pygments.highlight(js, JsonLexer(), Terminal256Formatter(style=self.pyg_style))  # pyright: ignore
        return f"{message} {js.strip()}"

    def _indent_continuation_lines(self, record: logging.LogRecord) -> None:
        msg = record.getMessage()
        if "\n" not in msg:
            return
        # align continuation lines under the first, ignoring color escapes in the prefix
        formatted = self.base.format(record)
        prefix = formatted[: formatted.find(msg)]
        width = len([c for c in prefix if c in string.printable])
        first, rest = msg.split("\n", 1)
        record.msg = record.message = f"{first}\n{textwrap.indent(rest, ' ' * width)}"
        record.args = None

    def _highlight(self) -> bool:
        isatty = getattr(self.stream, "isatty", None)
        return not self.no_color and isatty is not None and isatty()

    def __getattr__(self, name: str) -> t.Any:
        return getattr(self.base, name)
