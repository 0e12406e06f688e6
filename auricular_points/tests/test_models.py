"""Tests for point models and QuizProfile."""

from __future__ import annotations

import dataclasses

import numpy as np
import pytest

from auricular_points.analysis.authoring import author_row
from auricular_points.analysis.matching import grade_guess
from auricular_points.ingest.points_csv import parse_points_csv
from auricular_points.models.points import EarPoint, PointCatalog
from auricular_points.models.profile import QuizProfile
from auricular_points.models.results import GradeOutcome


@pytest.fixture()
def catalog() -> PointCatalog:
    return parse_points_csv("Shen Men,0.4,0.3\nPoint Zero,,\nKidney,0.5,0.6", source="test")


# -----------------------------------------------------------------------
# EarPoint / PointCatalog
# -----------------------------------------------------------------------


def test_point_frozen() -> None:
    p = EarPoint("A", "A", 0.1, 0.2)
    with pytest.raises(dataclasses.FrozenInstanceError):
        p.x = 0.5  # type: ignore[misc]


def test_display_label() -> None:
    assert EarPoint("Code7", "Helix").display_label == "Helix"
    assert EarPoint("Code7", "").display_label == "Code7"


def test_catalog_sequence(catalog: PointCatalog) -> None:
    assert len(catalog) == 3
    assert catalog.names == ["Kidney", "Point Zero", "Shen Men"]
    assert [p.name for p in catalog] == catalog.names
    assert catalog.source == "test"
    assert not catalog.is_empty


def test_located(catalog: PointCatalog) -> None:
    assert [p.name for p in catalog.located()] == ["Kidney", "Shen Men"]


def test_get(catalog: PointCatalog) -> None:
    assert catalog.get("Kidney") == EarPoint("Kidney", "Kidney", 0.5, 0.6)
    assert catalog.get("kidney") is None


def test_search(catalog: PointCatalog) -> None:
    assert [p.name for p in catalog.search("MEN")] == ["Shen Men"]
    assert [p.name for p in catalog.search("o")] == ["Point Zero"]
    assert catalog.search("") == list(catalog.points)
    assert catalog.search("xyz") == []


def test_to_dataframe(catalog: PointCatalog) -> None:
    df = catalog.to_dataframe()
    assert list(df.columns) == ["name", "body_part", "x", "y"]
    assert df["name"].tolist() == catalog.names
    assert np.isnan(df.loc[1, "x"]) and np.isnan(df.loc[1, "y"])
    assert df.loc[0, "x"] == pytest.approx(0.5)


def test_empty_catalog_dataframe() -> None:
    df = PointCatalog().to_dataframe()
    assert len(df) == 0
    assert list(df.columns) == ["name", "body_part", "x", "y"]


# -----------------------------------------------------------------------
# QuizProfile
# -----------------------------------------------------------------------


def test_profile_defaults() -> None:
    p = QuizProfile()
    assert p.tolerance_percent == 4.0
    assert p.tolerance == 0.04
    assert p.resource_name == "Auricular_Points"
    assert p.author_decimals == 3


def test_profile_frozen() -> None:
    p = QuizProfile()
    with pytest.raises(dataclasses.FrozenInstanceError):
        p.tolerance_percent = 5.0  # type: ignore[misc]


def test_profile_replace() -> None:
    p = dataclasses.replace(QuizProfile(), tolerance_percent=10.0)
    assert p.tolerance == pytest.approx(0.10)
    assert p.author_decimals == 3


@pytest.mark.parametrize(
    "kwargs",
    [
        {"tolerance_percent": 0.0},
        {"tolerance_percent": 150.0},
        {"resource_name": ""},
        {"author_decimals": -1},
    ],
)
def test_profile_validation(kwargs) -> None:
    with pytest.raises(ValueError):
        QuizProfile(**kwargs)


def test_profile_dict_roundtrip() -> None:
    p = QuizProfile(tolerance_percent=2.5, author_decimals=2)
    d = p.to_dict()
    assert d == {"tolerance_percent": 2.5, "resource_name": "Auricular_Points", "author_decimals": 2}
    assert QuizProfile.from_dict(d) == p
    assert QuizProfile.from_dict({**d, "unknown": 1}) == p


def test_profile_drives_grading_and_authoring(catalog: PointCatalog) -> None:
    strict = QuizProfile(tolerance_percent=1.0)
    loose = QuizProfile(tolerance_percent=10.0)
    query = (0.45, 0.3)  # 0.05 from Shen Men

    out_strict = grade_guess(catalog, query, "Shen Men", tolerance=strict.tolerance)
    out_loose = grade_guess(catalog, query, "Shen Men", tolerance=loose.tolerance)
    assert isinstance(out_strict, GradeOutcome) and isinstance(out_loose, GradeOutcome)
    assert not out_strict.correct
    assert out_loose.correct

    assert author_row("Helix", (0.12345, 0.5), decimals=loose.author_decimals) == "Helix,0.123,0.500"
