"""Report over a record source: query methods plus print variants.

`LegoSetReport` fetches the records from its source on every call and
delegates to `brickset_pipeline.aggregate.queries`. The `print_*` methods
write human-readable lines to the report's output stream: one value per
line for sequences, one line for scalars, one `key: value` line per group.
"""
from __future__ import annotations

import logging
import sys
from typing import Any, Iterable, TextIO

from brickset_pipeline.aggregate import queries
from brickset_pipeline.aggregate.queries import Restartable
from brickset_pipeline.aggregate.build_frames import (
    sets_ddf,
    frame_pieces_by_theme,
    frame_packaging_by_theme,
    frame_top_sets_by_pieces,
)
from brickset_pipeline.ingest.load_sets import RecordSource
from brickset_pipeline.models import PackagingType

log = logging.getLogger(__name__)


def format_value(value: Any) -> str:
    """Render a value the way the report prints it.

    ``None`` prints as ``null``, booleans as ``true``/``false``, and sets
    of packaging types as a sorted bracketed list.
    """
    if value is None:
        return "null"
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, (set, frozenset)):
        return "[" + ", ".join(sorted(format_value(v) for v in value)) + "]"
    return str(value)


class LegoSetReport:
    """Queries and printouts over the records of one `RecordSource`.

    Args:
        source: Zero-argument callable returning all records.
        out: Text stream for the print variants (defaults to `sys.stdout`
            at print time).
    """

    def __init__(self, source: RecordSource, out: TextIO | None = None) -> None:
        self._source = source
        self._out = out

    @property
    def out(self) -> TextIO:
        return self._out if self._out is not None else sys.stdout

    def _line(self, value: Any) -> None:
        print(format_value(value), file=self.out)

    def _lines(self, values: Iterable[Any]) -> None:
        for v in values:
            self._line(v)

    # -------------------------------------------------
    # Queries
    # -------------------------------------------------
    def count_by_theme(self, theme: str) -> int:
        return queries.count_by_theme(self._source(), theme)

    def count_pieces_over(self, threshold: int) -> int:
        return queries.count_pieces_over(self._source(), threshold)

    def names_sorted_alphabetically(self) -> Restartable[str | None]:
        return queries.names_sorted_alphabetically(self._source())

    def first_n_names(self, n: int = 5) -> list[str | None]:
        return queries.first_n_names(self._source(), n)

    def average_pieces(self) -> float:
        return queries.average_pieces(self._source())

    def any_has(self, piece_count: int) -> bool:
        return queries.any_has(self._source(), piece_count)

    def distinct_tags(self) -> Restartable[str]:
        return queries.distinct_tags(self._source())

    def max_pieces(self) -> int | None:
        return queries.max_pieces(self._source())

    def packaging_type_frequency(self) -> dict[PackagingType | None, int]:
        return queries.packaging_type_frequency(self._source())

    def theme_to_packaging_types(self) -> dict[str | None, frozenset[PackagingType]]:
        return queries.theme_to_packaging_types(self._source())

    # -------------------------------------------------
    # Print variants
    # -------------------------------------------------
    def print_count_by_theme(self, theme: str) -> None:
        self._line(self.count_by_theme(theme))

    def print_count_pieces_over(self, threshold: int) -> None:
        self._line(self.count_pieces_over(threshold))

    def print_names_alphabetically(self) -> None:
        self._lines(self.names_sorted_alphabetically())

    def print_first_n_names(self, n: int = 5) -> None:
        self._lines(self.first_n_names(n))

    def print_average_pieces(self) -> None:
        self._line(self.average_pieces())

    def print_any_has(self, piece_count: int) -> None:
        self._line(self.any_has(piece_count))

    def print_distinct_tags(self) -> None:
        self._lines(self.distinct_tags())

    def print_max_pieces(self) -> None:
        """Print the largest piece count; prints nothing when there are no sets."""
        most = self.max_pieces()
        if most is not None:
            self._line(most)

    def print_packaging_type_frequency(self) -> None:
        for packaging, count in self.packaging_type_frequency().items():
            print(f"{format_value(packaging)}: {count}", file=self.out)

    def print_theme_to_packaging_types(self) -> None:
        for theme, types in self.theme_to_packaging_types().items():
            print(f"{format_value(theme)}: {format_value(types)}", file=self.out)

    # -------------------------------------------------
    # Report groups
    # -------------------------------------------------
    def print_basics(self, theme: str = "Games", threshold: int = 450) -> None:
        """Filter, map, sort, limit and average printouts."""
        log.info("Printing basics report (theme=%r, threshold=%d)", theme, threshold)
        self.print_count_by_theme(theme)
        self.print_count_pieces_over(threshold)
        self.print_names_alphabetically()
        self.print_first_n_names()
        self.print_average_pieces()

    def print_groupings(self, piece_count: int = 481) -> None:
        """Match, distinct, max and grouping printouts."""
        log.info("Printing groupings report (piece_count=%d)", piece_count)
        self.print_any_has(piece_count)
        self.print_distinct_tags()
        self.print_max_pieces()
        self.print_packaging_type_frequency()
        self.print_theme_to_packaging_types()

    def print_summary(self, top_n: int = 5) -> None:
        """Per-theme piece statistics, packaging counts and the largest sets, as tables."""
        log.info("Printing summary tables (top_n=%d)", top_n)
        ddf = sets_ddf(self._source())

        pieces = frame_pieces_by_theme(ddf).compute().sort_values("theme")
        packaging = (
            frame_packaging_by_theme(ddf)
            .compute()
            .sort_values(["theme", "packaging_type"])
        )
        top = frame_top_sets_by_pieces(ddf, top_n).compute()

        print(pieces.to_string(index=False), file=self.out)
        print(file=self.out)
        print(packaging.to_string(index=False), file=self.out)
        print(file=self.out)
        print(top.to_string(index=False), file=self.out)
