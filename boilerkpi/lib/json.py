"""JSON with the value types that appear in scores, reports and stored records."""

from __future__ import annotations

import datetime
import decimal
import enum
import json as pyjson
import pathlib
import typing as t

import pydantic as p

JSONPrimitive = str | int | float | bool | None
JSONValue = JSONPrimitive | list["JSONValue"] | dict[str, "JSONValue"]

# Decimal scores keep their exact digits as strings
ENCODERS: dict[type, t.Callable[[t.Any], JSONValue]] = {
    datetime.date: lambda d: d.isoformat(),
    decimal.Decimal: str,
    enum.Enum: lambda e: e.value,
    pathlib.Path: str,
}


class JSONEncoder(pyjson.JSONEncoder):
    def default(self, o: t.Any) -> JSONValue:
        if isinstance(o, p.BaseModel):
            return o.model_dump(mode="json")

        for tp, encoder in ENCODERS.items():
            if isinstance(o, tp):
                return encoder(o)

        return super().default(o)


def dumps(obj: t.Any, *, cls: type[pyjson.JSONEncoder] = JSONEncoder, **kw: t.Any) -> str:
    return pyjson.dumps(obj, cls=cls, **kw)


def loads(s: str | bytes | bytearray, **kw: t.Any) -> JSONValue:
    return pyjson.loads(s, **kw)
