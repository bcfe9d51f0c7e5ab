from __future__ import annotations

from pathlib import Path

import xdg_base_dirs as xdg
from dependency_injector.containers import DeclarativeContainer
from dependency_injector.providers import Configuration, Provider, Singleton

from boilerkpi.storage.store import JSONFileKeyValueStore, KeyValueStore, MemoryKeyValueStore

from ..provider import LoggingProvider


def provide_store(backend: str, path: Path | None, logging: LoggingProvider) -> KeyValueStore:
    logger = logging.get_logger()

    if backend == "memory":
        logger.info("initialized key-value store", extra={"backend": backend})
        return MemoryKeyValueStore()

    if backend != "file":
        raise ValueError(f"unsupported storage backend: {backend}")
    if path is None:
        path = xdg.xdg_state_home() / "boilerkpi" / "store.json"
    logger.info("initialized key-value store", extra={"backend": backend, "path": path})
    return JSONFileKeyValueStore(Path(path))


class StorageContainer(DeclarativeContainer):
    config: Configuration = Configuration()
    logging: Provider[LoggingProvider] = Provider()

    store: Provider[KeyValueStore] = Singleton(
        provide_store, backend=config.backend, path=config.path, logging=logging
    )
