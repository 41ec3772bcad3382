from __future__ import annotations

import pytest
from pydantic import ValidationError

from brickset_pipeline.models import LegoSet, PackagingType


def test_lego_set_validates_camel_case_record() -> None:
    rec = {
        "number": "3843-1",
        "name": "Ramses Pyramid",
        "year": 2009,
        "theme": "Games",
        "pieces": 481,
        "tags": ["Board Game", "Dice"],
        "packagingType": "BOX",
    }
    s = LegoSet.model_validate(rec)
    assert s.packaging_type is PackagingType.BOX
    assert s.tags == ("Board Game", "Dice")


def test_lego_set_allows_nulls() -> None:
    s = LegoSet.model_validate(
        {"theme": None, "pieces": 0, "name": None, "tags": None, "packagingType": None}
    )
    assert s.theme is None
    assert s.tags is None
    assert s.packaging_type is None


def test_lego_set_dedupes_tags_keeping_first_occurrence() -> None:
    s = LegoSet.model_validate({"pieces": 1, "tags": ["Car", "Red", "Car"]})
    assert s.tags == ("Car", "Red")


def test_lego_set_rejects_negative_pieces() -> None:
    with pytest.raises(ValidationError):
        LegoSet.model_validate({"pieces": -1})


def test_lego_set_rejects_unknown_packaging_type() -> None:
    with pytest.raises(ValidationError):
        LegoSet.model_validate({"pieces": 1, "packagingType": "CRATE"})


def test_lego_set_is_frozen() -> None:
    s = LegoSet.model_validate({"pieces": 1})
    with pytest.raises(ValidationError):
        s.pieces = 2  # type: ignore[misc]
