import functools
import typing as t
from pathlib import Path

import pydantic as p
import yaml
from pydantic_settings import PydanticBaseSettingsSource
from pydantic_settings import SettingsError

from boilerkpi.model import DeploymentEnvironment


class SettingsCurrentState(t.TypedDict, total=False):
    root: t.Required[p.AnyUrl]
    env: t.Required[DeploymentEnvironment]
    override: tuple[str, ...]


class SectionSettingsSource(PydanticBaseSettingsSource):
    """Supplies whole settings sections by field name.

    `current_state` holds what the init source provided: the config root,
    the environment and the raw overrides. Those fields are never sections.
    """

    boot_fields: t.ClassVar[frozenset[str]] = frozenset({"env", "root", "override"})

    @property
    def state(self) -> SettingsCurrentState:
        return t.cast(SettingsCurrentState, self.current_state)

    def section(self, name: str) -> t.Any:
        """Return the raw value of section `name`, or raise KeyError if this source has none."""
        raise NotImplementedError

    def get_field_value(self, field: p.fields.FieldInfo, field_name: str) -> tuple[t.Any, str, bool]:
        return self.section(field_name), field_name, False

    def __call__(self) -> dict[str, t.Any]:
        data: dict[str, t.Any] = {}
        for name in self.settings_cls.model_fields:
            if name in self.boot_fields:
                continue
            try:
                data[name] = self.section(name)
            except KeyError:
                continue
        return data


class OverrideSettingsSource(SectionSettingsSource):
    """
    Apply `-o dotted.key=value` overrides; must precede the YAML source so
    that its partial values take priority when the sources are merged
    """

    @functools.cached_property
    def tree(self) -> dict[str, t.Any]:
        tree: dict[str, t.Any] = {}
        for option in self.state.get("override", ()):
            key, value = (s.strip() for s in option.split("=", 1))
            *parents, leaf = key.split(".")
            target = tree
            for parent in parents:
                target = target.setdefault(parent, {})
            target[leaf] = yaml.safe_load(value)
        return tree

    def section(self, name: str) -> t.Any:
        return self.tree[name]


class YAMLCascadingSettingsSource(SectionSettingsSource):
    """Reads `<section>.yaml`, preferring `env.d/<env>/` over the config root.

    The most specific file replaces the section as a whole.
    """

    @functools.cached_property
    def directories(self) -> list[Path]:
        root = self.state["root"]
        if root.scheme != "file" or root.path is None:
            raise SettingsError(f"config root is not a local directory: {root}")
        env = self.state["env"]
        # the config root itself serves the Local environment
        if env is DeploymentEnvironment.Local:
            return [Path(root.path)]
        return [Path(root.path) / "env.d" / env.value, Path(root.path)]

    def section(self, name: str) -> t.Any:
        for directory in self.directories:
            fn = directory / f"{name}.yaml"
            if not fn.exists():
                continue
            try:
                return yaml.safe_load(fn.read_text(encoding="utf8"))
            except yaml.YAMLError as e:
                raise SettingsError(f"error parsing {fn}") from e
        raise KeyError(name)
