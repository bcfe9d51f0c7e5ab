"""Tests for settings assembled from the cascading YAML configuration."""

from __future__ import annotations

import os
from pathlib import Path

import pydantic as p
import pytest
from pydantic_settings import SettingsError

import boilerkpi
from boilerkpi.core.config import ReportSettings, RubricSettings, Settings
from boilerkpi.core.container import provide_rubric
from boilerkpi.core.di import NotReady
from boilerkpi.model import DeploymentEnvironment

CONFIG_ROOT = Path(os.path.dirname(boilerkpi.__file__)).parent / "config"


def _settings(env: DeploymentEnvironment, *override: str) -> Settings:
    return Settings(env=env, root=p.FileUrl(f"file://{CONFIG_ROOT}"), override=override)


class TestSettings(object):
    """Tests for Settings and its sources."""

    def test_local_environment_reads_root_yaml(self) -> None:
        settings = _settings(DeploymentEnvironment.Local)

        assert settings.storage.backend == "file"
        assert settings.storage.path is None
        assert settings.report.title == "BÁO CÁO ĐÁNH GIÁ HIỆU SUẤT"
        assert settings.report.position == "Trưởng ca lò hơi"
        assert settings.rubric.path is None
        assert settings.logging.root.handlers == ["console"]

    def test_environment_directory_overrides_root(self) -> None:
        settings = _settings(DeploymentEnvironment.Test)

        assert settings.storage.backend == "memory"
        assert settings.logging.handlers["console"].level == "WARNING"
        # sections without an environment file fall back to the root file
        assert settings.report.title == "BÁO CÁO ĐÁNH GIÁ HIỆU SUẤT"

    def test_command_line_overrides_win(self) -> None:
        settings = _settings(
            DeploymentEnvironment.Test,
            "storage.backend=file",
            "report.organization=Nhà máy Hơi A",
        )

        assert settings.storage.backend == "file"
        assert settings.report.organization == "Nhà máy Hơi A"
        # keys not overridden keep their YAML values
        assert settings.report.position == "Trưởng ca lò hơi"

    def test_override_values_are_parsed_as_yaml(self) -> None:
        settings = _settings(DeploymentEnvironment.Local, "logging.disable_existing_loggers=true")

        assert settings.logging.disable_existing_loggers is True

    def test_invalid_override_is_rejected(self) -> None:
        with pytest.raises(p.ValidationError):
            _settings(DeploymentEnvironment.Local, "storage.backend=sqlite")

    def test_dump_uses_aliases(self) -> None:
        dumped = _settings(DeploymentEnvironment.Test).model_dump()

        formatter = dumped["logging"]["formatters"]["console"]
        assert formatter["()"] == "boilerkpi.lib.logging.ExtraFormatter"
        assert dumped["logging"]["handlers"]["console"]["class"] == "colorlog.StreamHandler"

    def test_sections_ignore_process_environment(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("PATH", "/usr/bin")
        monkeypatch.setenv("TITLE", "from the environment")

        assert RubricSettings().path is None
        assert ReportSettings().title == "BÁO CÁO ĐÁNH GIÁ HIỆU SUẤT"

    def test_unknown_section_keys_are_rejected(self) -> None:
        with pytest.raises(p.ValidationError):
            _settings(DeploymentEnvironment.Local, "report.subtitle=x")

    def test_unparseable_yaml_is_a_settings_error(self, tmp_path: Path) -> None:
        (tmp_path / "storage.yaml").write_text("backend: [memory\n", encoding="utf8")

        with pytest.raises(SettingsError):
            Settings(env=DeploymentEnvironment.Local, root=p.FileUrl(f"file://{tmp_path}"), override=())


class TestProvideRubric(object):
    def test_relative_path_resolves_against_root(self) -> None:
        rubric = provide_rubric("boilerkpi/rubric/data/boiler_shift_manager.yaml", CONFIG_ROOT.parent)

        assert [c.id for c in rubric] == ["cat_1", "cat_2", "cat_3", "cat_4"]

    def test_path_requires_root(self) -> None:
        with pytest.raises(RuntimeError):
            provide_rubric("rubric.yaml", NotReady())
