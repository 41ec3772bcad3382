from __future__ import annotations

from typing import Callable

import pytest

from brickset_pipeline.models import LegoSet, PackagingType

SetFactory = Callable[..., LegoSet]


def _make_set(
    pieces: int,
    theme: str | None = None,
    name: str | None = None,
    tags: list[str] | None = None,
    packaging: PackagingType | None = None,
) -> LegoSet:
    return LegoSet(theme=theme, pieces=pieces, name=name, tags=tags, packaging_type=packaging)


@pytest.fixture
def make_set() -> SetFactory:
    return _make_set


@pytest.fixture
def example_sets() -> list[LegoSet]:
    return [
        _make_set(500, theme="Games", name="Ramses Return", tags=["Dice", "Egypt"],
                  packaging=PackagingType.BOX),
        _make_set(400, theme="City", name="Fire Station", tags=["Fire"],
                  packaging=PackagingType.POLYBAG),
        _make_set(450, theme="Games", name=None, tags=None, packaging=None),
    ]
