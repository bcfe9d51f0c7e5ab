"""Key-value storage port and its implementations."""

from __future__ import annotations

import abc
import logging
import os
import tempfile
import typing as t
from pathlib import Path

import boilerkpi.lib.json as json

logger = logging.getLogger(__name__)


class KeyValueStore(abc.ABC):
    """String-keyed store of string values, shaped after browser local storage."""

    @abc.abstractmethod
    def get(self, key: str) -> str | None:
        """Return the value stored under ``key``, or None if absent."""
        ...

    @abc.abstractmethod
    def set(self, key: str, value: str) -> None: ...

    @abc.abstractmethod
    def delete(self, key: str) -> None:
        """Remove ``key``; removing an absent key is not an error."""
        ...


class MemoryKeyValueStore(KeyValueStore):
    def __init__(self, initial: t.Mapping[str, str] | None = None) -> None:
        self._data: dict[str, str] = dict(initial or {})

    def get(self, key: str) -> str | None:
        return self._data.get(key)

    def set(self, key: str, value: str) -> None:
        self._data[key] = value

    def delete(self, key: str) -> None:
        self._data.pop(key, None)


class JSONFileKeyValueStore(KeyValueStore):
    """Persist all keys in a single JSON object on disk.

    The file is read and rewritten whole on every operation. A missing or
    unreadable file behaves as an empty store.
    """

    def __init__(self, path: Path) -> None:
        self.path = path

    def _read(self) -> dict[str, str]:
        if not self.path.exists():
            return {}
        try:
            data = json.loads(self.path.read_text(encoding="utf8"))
        except ValueError:
            logger.warning("ignoring unreadable store file", extra={"path": self.path})
            return {}
        if not isinstance(data, dict) or not all(isinstance(v, str) for v in data.values()):
            logger.warning("ignoring malformed store file", extra={"path": self.path})
            return {}
        return t.cast(dict[str, str], data)

    def _write(self, data: dict[str, str]) -> None:
        self.path.parent.mkdir(parents=True, exist_ok=True)
        fd, tmp = tempfile.mkstemp(dir=self.path.parent, prefix=f".{self.path.name}.")
        try:
            with os.fdopen(fd, "w", encoding="utf8") as f:
                f.write(json.dumps(data, ensure_ascii=False, indent=2, sort_keys=True))
            os.replace(tmp, self.path)
        except BaseException:
            os.unlink(tmp)
            raise

    def get(self, key: str) -> str | None:
        return self._read().get(key)

    def set(self, key: str, value: str) -> None:
        data = self._read()
        data[key] = value
        self._write(data)

    def delete(self, key: str) -> None:
        data = self._read()
        if key in data:
            del data[key]
            self._write(data)
