"""Pytest fixtures for boilerkpi tests.

The container fixture boots the application in the Test environment, which
logs at WARNING and keeps accounts in an in-memory store. Rubric fixtures
build small hand-made rubrics so scoring expectations stay easy to follow.

Usage:
    def test_total(make_rubric: RubricFactory):
        rubric = make_rubric(make_item("a", max_points=10))
        ...
"""

from __future__ import annotations

import decimal
import os
import typing as t
from pathlib import Path

import pydantic as p
import pytest

import boilerkpi
from boilerkpi.core import BoilerKPIContainer
from boilerkpi.model import Criterion, DeploymentEnvironment, KPICategory, KPIItem, RatingLevel, Rubric
from boilerkpi.rubric import load_rubric
from boilerkpi.storage import MemoryKeyValueStore

PROJECT_ROOT = Path(os.path.dirname(boilerkpi.__file__)).parent
CONFIG_ROOT = PROJECT_ROOT / "config"

Number = int | float | str | decimal.Decimal


class ItemFactory(t.Protocol):
    def __call__(
        self,
        item_id: str,
        *,
        max_points: Number = 10,
        good: Number = 1,
        average: Number = "0.7",
        weak: Number = 0,
    ) -> KPIItem: ...


class RubricFactory(t.Protocol):
    def __call__(self, *categories: tuple[str, t.Sequence[KPIItem]]) -> Rubric: ...


def _criterion(label: str, score_percent: Number) -> Criterion:
    return Criterion(label=label, description=label, score_percent=decimal.Decimal(str(score_percent)))


@pytest.fixture(scope="session")
def container() -> t.Generator[BoilerKPIContainer]:
    """Boot the DI container once for the test session."""
    ct = BoilerKPIContainer()

    BoilerKPIContainer.boot(
        ct,
        debug=False,
        env=DeploymentEnvironment.Test,
        config_root=p.FileUrl(f"file://{CONFIG_ROOT}"),
        override=(),
    )

    yield ct

    ct.shutdown_resources()


@pytest.fixture(scope="session")
def rubric() -> Rubric:
    """The rubric bundled with the package."""
    return load_rubric()


@pytest.fixture
def make_item() -> ItemFactory:
    def factory(
        item_id: str,
        *,
        max_points: Number = 10,
        good: Number = 1,
        average: Number = "0.7",
        weak: Number = 0,
    ) -> KPIItem:
        return KPIItem(
            id=item_id,
            code=item_id,
            name=f"Item {item_id}",
            max_points=decimal.Decimal(str(max_points)),
            criteria={
                RatingLevel.Good: _criterion("Tốt", good),
                RatingLevel.Average: _criterion("Trung bình", average),
                RatingLevel.Weak: _criterion("Yếu", weak),
            },
        )

    return factory


@pytest.fixture
def make_rubric() -> RubricFactory:
    """Build a rubric from `(category_id, items)` pairs; names are `N. Category N`."""

    def factory(*categories: tuple[str, t.Sequence[KPIItem]]) -> Rubric:
        return tuple(
            KPICategory(id=category_id, name=f"{n}. Category {n}", items=tuple(items))
            for n, (category_id, items) in enumerate(categories, start=1)
        )

    return factory


@pytest.fixture
def simple_rubric(make_item: ItemFactory, make_rubric: RubricFactory) -> Rubric:
    """One category holding one 10-point item scored 1.0 / 0.7 / 0.0."""
    return make_rubric(("c1", [make_item("x")]))


@pytest.fixture
def store() -> MemoryKeyValueStore:
    return MemoryKeyValueStore()
