from __future__ import annotations

import os
import types
from pathlib import Path

import pydantic as p
from dependency_injector.containers import DeclarativeContainer
from dependency_injector.providers import Configuration, Container, Object, Provider, Resource, Singleton

import boilerkpi
from boilerkpi.model import BaseModel, DeploymentEnvironment, Rubric
from boilerkpi.rubric import load_rubric

from ..config import Settings
from ..di import NotReady
from ..provider import LoggingProvider
from .auth import AuthContainer
from .storage import StorageContainer
from .template import TemplateContainer


def provide_rubric(path: str | None, root: Path | NotReady) -> Rubric:
    if path is None:
        return load_rubric()
    if isinstance(root, NotReady):
        raise RuntimeError("root path is unavailable")
    return load_rubric(root / path)


class BootConfiguration(BaseModel):
    debug: bool
    env: DeploymentEnvironment
    config_root: p.AnyUrl
    override: tuple[str, ...]


class BoilerKPIContainer(DeclarativeContainer):
    config: Configuration = Configuration()

    debug: Provider[bool] = Singleton(bool)
    env: Provider[DeploymentEnvironment] = Singleton(DeploymentEnvironment, DeploymentEnvironment.Local)
    root: Object[NotReady | Path] = Object(NotReady())

    logging: Provider[LoggingProvider] = Resource(LoggingProvider, config=config.logging, debug=debug)
    storage: Provider[StorageContainer] = Container(StorageContainer, config=config.storage, logging=logging)
    template: Provider[TemplateContainer] = Container(TemplateContainer, config=config.report)
    auth: Provider[AuthContainer] = Container(AuthContainer, store=storage.store)

    rubric: Provider[Rubric] = Singleton(provide_rubric, path=config.rubric.path, root=root)

    @staticmethod
    def boot(
        ct: BoilerKPIContainer,
        /,
        debug: bool,
        env: DeploymentEnvironment,
        config_root: p.FileUrl,
        override: tuple[str, ...] | None = None,
        wiring: tuple[str | types.ModuleType, ...] | None = None,
    ):
        if config_root.scheme != "file":
            raise ValueError(f"unsupported scheme for config root: {config_root.scheme}")
        ps = Settings(env=env, root=config_root, override=override or ())
        ct.config.from_pydantic(ps)
        ct.debug.override(debug)
        ct.env.override(env)
        ct.root.override(Path(os.path.dirname(boilerkpi.__file__)).parent)

        ct.wire(packages=["boilerkpi"])
        if wiring:
            ct.wire(modules=wiring)

        logger = ct.logging().get_logger()
        if ps.override:
            logger.info(
                "overriding configuration",
                extra={"overrides": dict(o.split("=", 1) for o in ps.override)},
            )
        logger.debug(
            "booted container",
            extra=BootConfiguration(debug=debug, env=env, config_root=config_root, override=ps.override).model_dump(
                mode="json"
            ),
        )
