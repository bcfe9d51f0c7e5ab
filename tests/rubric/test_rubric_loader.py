"""Tests for loading rubrics from YAML."""

from __future__ import annotations

import decimal
from pathlib import Path

import pydantic as p
import pytest
import yaml

from boilerkpi.core import BoilerKPIContainer
from boilerkpi.model import KPICategory, RatingLevel, Rubric
from boilerkpi.rubric import DEFAULT_RUBRIC_PATH, load_rubric, parse_rubric, RubricError


class TestLoadRubric(object):
    """Tests for load_rubric and parse_rubric."""

    def test_bundled_rubric_structure(self, rubric: Rubric) -> None:
        assert [c.id for c in rubric] == ["cat_1", "cat_2", "cat_3", "cat_4"]
        assert [len(c.items) for c in rubric] == [4, 2, 4, 2]
        assert sum(item.max_points for c in rubric for item in c.items) == 100

    def test_bundled_rubric_items(self, rubric: Rubric) -> None:
        item = rubric[0].items[0]

        assert item.id == "1.1"
        assert item.name == "Quản lý nhà máy"
        assert item.max_points == decimal.Decimal(10)
        assert set(item.criteria) == set(RatingLevel)
        assert item.criteria[RatingLevel.Average].score_percent == decimal.Decimal("0.7")
        assert item.criteria[RatingLevel.Weak].score_percent == decimal.Decimal("0.5")
        assert len(item.checklist) > 0

    def test_defaults_to_bundled_rubric(self) -> None:
        assert load_rubric() == load_rubric(DEFAULT_RUBRIC_PATH)

    def test_rubric_is_immutable(self, rubric: Rubric) -> None:
        with pytest.raises(p.ValidationError):
            rubric[0].name = "changed"  # pyright: ignore [reportAttributeAccessIssue]

    def test_loads_from_path(self, tmp_path: Path) -> None:
        data = [
            {
                "id": "cat_x",
                "name": "1. Thử nghiệm",
                "items": [
                    {
                        "id": "x.1",
                        "code": "X1",
                        "name": "Mục thử",
                        "max_points": 5,
                        "unit": "%",
                        "criteria": {
                            "GOOD": {"label": "Tốt", "description": "", "score_percent": 1},
                            "AVERAGE": {"label": "Trung bình", "description": "", "score_percent": 0.5},
                            "WEAK": {"label": "Yếu", "description": "", "score_percent": 0},
                        },
                    }
                ],
            }
        ]
        path = tmp_path / "rubric.yaml"
        path.write_text(yaml.safe_dump(data, allow_unicode=True), encoding="utf8")

        rubric = load_rubric(path)

        assert len(rubric) == 1
        assert isinstance(rubric[0], KPICategory)
        assert rubric[0].items[0].unit == "%"
        assert rubric[0].items[0].checklist == ()

    def test_rejects_malformed_file(self, tmp_path: Path) -> None:
        path = tmp_path / "rubric.yaml"
        path.write_text("- id: cat_1\n  name: '1. VẬN HÀNH'\n  items: []\n", encoding="utf8")

        with pytest.raises(RubricError) as exc_info:
            load_rubric(path)

        assert exc_info.value.errors == ["Category cat_1 has no items"]
        assert "Category cat_1 has no items" in str(exc_info.value)

    def test_rejects_unknown_criteria_keys(self, tmp_path: Path) -> None:
        data = yaml.safe_load(DEFAULT_RUBRIC_PATH.read_text(encoding="utf8"))
        data[0]["items"][0]["criteria"]["EXCELLENT"] = {"label": "Xuất sắc", "description": "", "score_percent": 1}
        path = tmp_path / "rubric.yaml"
        path.write_text(yaml.safe_dump(data, allow_unicode=True), encoding="utf8")

        with pytest.raises(RubricError) as exc_info:
            load_rubric(path)

        assert exc_info.value.errors == ["Item 1.1 unknown criteria keys: EXCELLENT"]

    def test_model_errors_are_rubric_errors(self) -> None:
        """Problems only the model catches still surface as RubricError."""
        data = yaml.safe_load(DEFAULT_RUBRIC_PATH.read_text(encoding="utf8"))
        data[0]["items"][0]["unit"] = ["đ"]

        with pytest.raises(RubricError) as exc_info:
            parse_rubric(data)

        assert len(exc_info.value.errors) == 1
        assert exc_info.value.errors[0].startswith("0.items.0.unit: ")
        assert isinstance(exc_info.value.__cause__, p.ValidationError)

    def test_parse_rubric_rejects_empty(self) -> None:
        with pytest.raises(RubricError) as exc_info:
            parse_rubric([])

        assert exc_info.value.errors == ["KPI data must be a non-empty sequence"]


class TestContainerRubric(object):
    def test_container_provides_bundled_rubric(self, container: BoilerKPIContainer, rubric: Rubric) -> None:
        assert container.rubric() == rubric
