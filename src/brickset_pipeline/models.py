"""Pydantic models for the Brickset LEGO set catalogue.

`LegoSet` mirrors one object of `brickset.json` field-for-field (camelCase
keys are kept through aliases) and is frozen once validated.
"""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field, field_validator


class PackagingType(str, Enum):
    """Packaging a LEGO set was sold in, as spelled in `brickset.json`."""
    BOX = "BOX"
    BOX_WITH_BACKING_CARD = "BOX_WITH_BACKING_CARD"
    BLISTER_PACK = "BLISTER_PACK"
    BUCKET = "BUCKET"
    CANISTER = "CANISTER"
    FOIL_PACK = "FOIL_PACK"
    NONE = "NONE"
    NOT_SPECIFIED = "NOT_SPECIFIED"
    OTHER = "OTHER"
    PLASTIC_BOX = "PLASTIC_BOX"
    POLYBAG = "POLYBAG"
    SHRINK_WRAPPED = "SHRINK_WRAPPED"
    TAG = "TAG"
    TUB = "TUB"
    ZIP_BAG = "ZIP_BAG"

    def __str__(self) -> str:
        return self.value


class LegoSet(BaseModel):
    """Schema for a single LEGO set record.

    Attributes:
        theme: Theme name (e.g. 'City'), if known.
        pieces: Number of pieces in the set; only a JSON integer is
            accepted (no booleans, strings or floats).
        name: Set name, if known.
        tags: Distinct tags in first-seen order, or ``None`` when the set
            has no tag list at all.
        packaging_type: How the set was packaged, if known.
    """
    model_config = ConfigDict(frozen=True, extra="ignore", populate_by_name=True)
    theme: str | None = None
    pieces: int = Field(..., ge=0, strict=True)
    name: str | None = None
    tags: tuple[str, ...] | None = None
    packaging_type: PackagingType | None = Field(default=None, alias="packagingType")

    @field_validator("tags")
    @classmethod
    def _dedupe_tags(cls, v: tuple[str, ...] | None) -> tuple[str, ...] | None:
        # a set in the catalogue; keep first-occurrence order
        if v is None:
            return None
        return tuple(dict.fromkeys(v))
