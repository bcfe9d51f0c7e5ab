import pathlib

import jinja2
from dependency_injector.containers import DeclarativeContainer
from dependency_injector.providers import Configuration, Provider, ThreadSafeSingleton

from boilerkpi.core import di


class TemplateContainer(DeclarativeContainer):
    @staticmethod
    @di.inject
    def provide_report_env(template_path: str, root_path: pathlib.Path = di.Provide["root"]) -> jinja2.Environment:
        from boilerkpi.report import create_environment

        return create_environment(root_path.joinpath(template_path))

    config: Configuration = Configuration(strict=True)
    report: Provider[jinja2.Environment] = ThreadSafeSingleton(provide_report_env, config.template_path)
