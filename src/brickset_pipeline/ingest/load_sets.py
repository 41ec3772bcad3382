"""Load `brickset.json` into validated, immutable `LegoSet` records.

`LegoSetStore` is the record store: it loads its document at construction
and afterwards only hands out the same tuple of records. Aggregations take
a `RecordSource` (any zero-argument callable returning the records) rather
than the store itself, so a bound `store.get_all` or a plain lambda both
work.
"""

from __future__ import annotations

import json
import logging
from importlib import resources
from pathlib import Path
from typing import Any, Callable, Sequence

from pydantic import ValidationError

from brickset_pipeline.errors import MalformedRecordError
from brickset_pipeline.models import LegoSet

log = logging.getLogger(__name__)

BUNDLED_DATASET = "brickset.json"

RecordSource = Callable[[], Sequence[LegoSet]]


def read_bundled_dataset() -> str:
    """Return the text of the `brickset.json` shipped inside the package."""
    return (
        resources.files("brickset_pipeline")
        .joinpath("data")
        .joinpath(BUNDLED_DATASET)
        .read_text(encoding="utf-8")
    )


def parse_sets(text: str) -> tuple[LegoSet, ...]:
    """Parse a Brickset JSON document into `LegoSet` records.

    Args:
        text: JSON text holding an array of set objects.

    Returns:
        Tuple of records in document order.

    Raises:
        MalformedRecordError: if the text is not valid JSON, is not an
            array, or any entry fails validation.
    """
    try:
        doc: Any = json.loads(text)
    except json.JSONDecodeError as e:
        raise MalformedRecordError(f"dataset is not valid JSON: {e}") from e

    if not isinstance(doc, list):
        raise MalformedRecordError(
            f"dataset must be a JSON array of sets, got {type(doc).__name__}"
        )

    records: list[LegoSet] = []
    for i, entry in enumerate(doc):
        try:
            records.append(LegoSet.model_validate(entry))
        except ValidationError as e:
            raise MalformedRecordError(f"set #{i} is malformed: {e}", index=i) from e

    return tuple(records)


def load_sets(path: Path | None = None) -> tuple[LegoSet, ...]:
    """Load LEGO sets from `path`, or from the bundled dataset.

    Args:
        path: Optional JSON file overriding the bundled `brickset.json`.

    Returns:
        Tuple of validated records.
    """
    if path is None:
        text = read_bundled_dataset()
        origin = BUNDLED_DATASET
    else:
        text = path.read_text(encoding="utf-8")
        origin = str(path)

    records = parse_sets(text)
    log.info("Loaded %d LEGO sets from %s", len(records), origin)
    return records


class LegoSetStore:
    """Read-only holder of the records loaded from one dataset.

    Args:
        path: JSON file to load; the bundled dataset when omitted.
        records: Records already in memory; when given, nothing is loaded
            and `path` must be omitted.
    """

    def __init__(
        self,
        path: Path | None = None,
        records: Sequence[LegoSet] | None = None,
    ) -> None:
        if records is not None:
            if path is not None:
                raise ValueError("pass either a dataset path or records, not both")
            self._records = tuple(records)
        else:
            self._records = load_sets(path)

    @classmethod
    def from_records(cls, records: Sequence[LegoSet]) -> LegoSetStore:
        """Build a store over records that are already in memory."""
        return cls(records=records)

    def get_all(self) -> tuple[LegoSet, ...]:
        """Return every record, in the order they were loaded."""
        return self._records

    def __len__(self) -> int:
        return len(self._records)
