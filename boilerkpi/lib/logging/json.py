import typing as t

from boilerkpi.lib.json import JSONEncoder as BaseJSONEncoder
from boilerkpi.lib.json import JSONValue


class JSONEncoder(BaseJSONEncoder):
    """Never fails on a log record's `extra=` fields; unknown values are logged by repr."""

    def default(self, o: t.Any) -> JSONValue:
        try:
            return super().default(o)
        except TypeError:
            return repr(o)
