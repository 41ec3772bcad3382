"""Exceptions raised while loading and aggregating LEGO set records."""

from __future__ import annotations


class BricksetError(Exception):
    """Base class for brickset_pipeline errors."""


class EmptyDatasetError(BricksetError, ValueError):
    """A reduction that needs at least one record was run over none."""


class MalformedRecordError(BricksetError, ValueError):
    """The dataset document, or one of its entries, failed to load.

    Attributes:
        index: Position of the offending entry in the JSON array, or
            ``None`` when the document as a whole is unusable.
    """

    def __init__(self, message: str, index: int | None = None) -> None:
        super().__init__(message)
        self.index = index
