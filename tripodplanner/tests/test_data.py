"""Tests for SourceDataHandler (data.py).

Key goal: the bundled sample catalog loads and indexes cleanly, and custom
CSVs with tripod names or blank cells resolve to the right ids.
"""
from pathlib import Path

import pytest

from tripodplanner import CandidateIndex, CatalogError, InvalidReason, SourceDataHandler
from tripodplanner.constants import CATEGORY_MAP


def test_sample_catalog_loads(ds: SourceDataHandler) -> None:
    items = ds.get_items()
    assert len(items) == 75
    assert ds.get_trait_count() == 53
    assert ds.get_priority_count() == 20


def test_sample_item_fields(ds: SourceDataHandler) -> None:
    items = ds.get_items()
    assert items[0].name == "01:01"
    assert items[0].category == CATEGORY_MAP["Weapon"]
    assert items[5].trait_ids == [24, 51]
    assert items[32].trait_ids == []


def test_sample_every_tripod_obtainable(ds: SourceDataHandler) -> None:
    index = CandidateIndex.build(ds.get_items(), ds.get_trait_count())
    assert index.unobtainable() == []


def test_trait_names(ds: SourceDataHandler) -> None:
    names = ds.get_trait_names()
    assert len(names) == 53
    assert names[0] == "Punishing Strike: Mind Enhancement"
    assert ds.get_trait_name(0) == "Empty"
    assert ds.get_trait_name(999) == "Tripod 999"


def test_get_plan(ds: SourceDataHandler) -> None:
    plan = ds.get_plan({0: 2})
    assert plan.capacity == {0: 2}
    assert plan.priority_count == 20
    assert len(plan.items) == 75
    assert len(plan.trait_names) == 53


def _write(tmp_path: Path, items: str, traits: str | None = None) -> Path:
    (tmp_path / "items.csv").write_text(items, encoding="utf-8")
    if traits is not None:
        (tmp_path / "traits.csv").write_text(traits, encoding="utf-8")
    return tmp_path


def test_custom_csv_with_names_and_blanks(tmp_path: Path) -> None:
    resources = _write(
        tmp_path,
        "name,category,cost,trait_1,trait_2,trait_3\n"
        "sword,weapon,120,Fire,,\n"
        "cap,1,0,2,fire,\n",
        "id,name,priority\n1,Fire,1\n2,Ice,0\n",
    )
    ds = SourceDataHandler(resources)
    items = ds.get_items()
    assert items[0].category == CATEGORY_MAP["Weapon"]
    assert items[0].cost == 120
    assert items[0].trait_ids == [1]
    assert items[1].trait_ids == [2, 1]
    assert ds.get_priority_count() == 1


def test_missing_traits_file(tmp_path: Path) -> None:
    resources = _write(tmp_path, "name,category,cost,trait_1\nx,0,1,3\n")
    ds = SourceDataHandler(resources)
    assert ds.get_trait_count() == 0
    assert ds.get_priority_count() == 0
    assert ds.get_items()[0].trait_ids == [3]


def test_unknown_names_rejected(tmp_path: Path) -> None:
    resources = _write(
        tmp_path,
        "name,category,cost,trait_1\nx,Boots,0,1\n",
        "id,name\n1,Fire\n",
    )
    with pytest.raises(CatalogError):
        SourceDataHandler(resources).get_items()

    resources = _write(tmp_path, "name,category,cost,trait_1\nx,0,0,Water\n")
    with pytest.raises(CatalogError):
        SourceDataHandler(resources).get_items()


def test_non_leading_priority_is_ignored(tmp_path: Path) -> None:
    resources = _write(
        tmp_path,
        "name,category,cost,trait_1\nx,0,0,1\n",
        "id,name,priority\n1,A,1\n2,B,0\n3,C,1\n",
    )
    assert SourceDataHandler(resources).get_priority_count() == 1


def test_blank_priority_cell_is_low_priority(tmp_path: Path) -> None:
    resources = _write(
        tmp_path,
        "name,category,cost,trait_1\nx,0,0,1\n",
        "id,name,priority\n1,Fire,1\n2,Ice,\n",
    )
    assert SourceDataHandler(resources).get_priority_count() == 1


@pytest.mark.parametrize("items, traits", [
    ("name,category,cost,trait_1\nx,0,abc,1\n", "id,name\n1,Fire\n"),
    ("name,category,cost,trait_1\nx,0,0,1\n", "id,name,priority\n1,Fire,yes\n"),
])
def test_malformed_numbers_rejected(tmp_path: Path, items: str, traits: str) -> None:
    ds = SourceDataHandler(_write(tmp_path, items, traits))
    with pytest.raises(CatalogError) as exc_info:
        ds.get_plan()
    assert exc_info.value.reason == InvalidReason.INVALID_VALUE
