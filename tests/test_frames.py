from __future__ import annotations

from typing import Callable

import pytest

from brickset_pipeline.aggregate.build_frames import (
    frame_packaging_by_theme,
    frame_pieces_by_theme,
    frame_sets_by_theme,
    frame_top_sets_by_pieces,
    sets_ddf,
    sets_frame,
)
from brickset_pipeline.models import LegoSet, PackagingType


@pytest.fixture
def theme_sets(make_set: Callable[..., LegoSet]) -> list[LegoSet]:
    return [
        make_set(500, theme="Games", name="A", tags=["x", "y"], packaging=PackagingType.BOX),
        make_set(400, theme="City", name="B", packaging=PackagingType.POLYBAG),
        make_set(450, theme="Games", name="C", packaging=PackagingType.BOX),
        make_set(100, theme="City", name="D", packaging=None),
    ]


def test_sets_frame_columns(theme_sets: list[LegoSet]) -> None:
    pdf = sets_frame(theme_sets)
    assert list(pdf.columns) == ["name", "theme", "pieces", "packaging_type", "tag_count"]
    assert pdf.loc[0, "packaging_type"] == "BOX"
    assert int(pdf.loc[0, "tag_count"]) == 2
    assert int(pdf.loc[1, "tag_count"]) == 0


def test_sets_frame_empty() -> None:
    assert sets_frame([]).empty


def test_frame_sets_by_theme_counts(theme_sets: list[LegoSet]) -> None:
    g = frame_sets_by_theme(sets_ddf(theme_sets)).compute()
    counts = {r["theme"]: int(r["sets_count"]) for _, r in g.iterrows()}
    assert counts == {"Games": 2, "City": 2}


def test_frame_pieces_by_theme_stats(theme_sets: list[LegoSet]) -> None:
    g = frame_pieces_by_theme(sets_ddf(theme_sets)).compute()
    stats = {
        r["theme"]: (int(r["sets_count"]), float(r["avg_pieces"]), int(r["max_pieces"]))
        for _, r in g.iterrows()
    }
    assert stats["Games"] == (2, 475.0, 500)
    assert stats["City"] == (2, 250.0, 400)


def test_frame_packaging_by_theme_skips_null_packaging(theme_sets: list[LegoSet]) -> None:
    g = frame_packaging_by_theme(sets_ddf(theme_sets)).compute()
    counts = {(r["theme"], r["packaging_type"]): int(r["sets_count"]) for _, r in g.iterrows()}
    assert counts == {("Games", "BOX"): 2, ("City", "POLYBAG"): 1}


def test_frame_top_sets_by_pieces(theme_sets: list[LegoSet]) -> None:
    g = frame_top_sets_by_pieces(sets_ddf(theme_sets), top_n=2).compute()
    assert list(g["name"]) == ["A", "C"]
