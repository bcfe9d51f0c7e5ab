import typing as t
from pathlib import Path

from .base import BaseSettings


class StorageSettings(BaseSettings):
    """Key-value storage backing accounts, the current session and preferences.

    With the `file` backend and no `path`, the store lives under the XDG
    state directory.
    """

    backend: t.Literal["memory", "file"] = "file"
    path: Path | None = None
