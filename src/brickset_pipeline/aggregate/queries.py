"""Collection-pipeline queries over LEGO set records.

Every function takes the full record sequence and is pure: records are
never mutated and no function depends on another's result.

Expectations:
- Input: a sequence of `LegoSet` in load order (order carries no meaning
  except for `first_n_names` and the first-occurrence order of
  `distinct_tags`).
- Outputs: scalars, lazy `Restartable` iterables, or plain dicts as
  documented on each function.
"""
from __future__ import annotations

from collections import Counter, defaultdict
from itertools import islice
from typing import Callable, Generic, Iterator, Sequence, TypeVar

from brickset_pipeline.errors import EmptyDatasetError
from brickset_pipeline.models import LegoSet, PackagingType

T = TypeVar("T")


class Restartable(Generic[T]):
    """Lazy iterable that rebuilds its iterator on every `iter()` call.

    Nothing is computed until iteration starts, and a consumed iterator
    does not exhaust the `Restartable` itself.
    """

    def __init__(self, factory: Callable[[], Iterator[T]]) -> None:
        self._factory = factory

    def __iter__(self) -> Iterator[T]:
        return self._factory()


# =========================================================
# FILTER / COUNT
# =========================================================

def count_by_theme(records: Sequence[LegoSet], theme: str) -> int:
    """Return how many sets have a theme containing `theme`.

    Args:
        records: LEGO set records.
        theme: Substring to look for; sets without a theme never match.
    """
    return sum(1 for s in records if s.theme is not None and theme in s.theme)


def count_pieces_over(records: Sequence[LegoSet], threshold: int) -> int:
    """Return how many sets have strictly more than `threshold` pieces."""
    return sum(1 for s in records if s.pieces > threshold)


def any_has(records: Sequence[LegoSet], piece_count: int) -> bool:
    """Return True if at least one set has exactly `piece_count` pieces."""
    return any(s.pieces == piece_count for s in records)


# =========================================================
# MAP / SORT / LIMIT
# =========================================================

def _nulls_first(name: str | None) -> tuple[bool, str]:
    return (name is not None, name or "")


def names_sorted_alphabetically(records: Sequence[LegoSet]) -> Restartable[str | None]:
    """Return set names in ascending order, missing names first.

    Returns:
        A `Restartable` that sorts on each iteration.
    """
    return Restartable(
        lambda: iter(sorted((s.name for s in records), key=_nulls_first))
    )


def first_n_names(records: Sequence[LegoSet], n: int = 5) -> list[str | None]:
    """Return the names of the first `n` sets in load order.

    Args:
        records: LEGO set records.
        n: Number of names to take; fewer are returned when there are
            fewer records.

    Raises:
        ValueError: if `n` is negative.
    """
    if n < 0:
        raise ValueError(f"n must be >= 0, got {n}")
    return [s.name for s in islice(records, n)]


def distinct_tags(records: Sequence[LegoSet]) -> Restartable[str]:
    """Return every tag once, in the order it is first seen.

    Sets whose `tags` is ``None`` are skipped.
    """
    def _walk() -> Iterator[str]:
        seen: set[str] = set()
        for s in records:
            if s.tags is None:
                continue
            for tag in s.tags:
                if tag not in seen:
                    seen.add(tag)
                    yield tag

    return Restartable(_walk)


# =========================================================
# REDUCE
# =========================================================

def average_pieces(records: Sequence[LegoSet]) -> float:
    """Return the mean number of pieces per set.

    Raises:
        EmptyDatasetError: if there are no records.
    """
    if not records:
        raise EmptyDatasetError("cannot average pieces over an empty dataset")
    return sum(s.pieces for s in records) / len(records)


def max_pieces(records: Sequence[LegoSet]) -> int | None:
    """Return the largest piece count, or ``None`` for an empty dataset."""
    return max((s.pieces for s in records), default=None)


# =========================================================
# GROUP
# =========================================================

def packaging_type_frequency(
    records: Sequence[LegoSet],
) -> dict[PackagingType | None, int]:
    """Count sets per packaging type.

    Sets without a packaging type are counted under the ``None`` key, so
    the values always add up to ``len(records)``.
    """
    return dict(Counter(s.packaging_type for s in records))


def theme_to_packaging_types(
    records: Sequence[LegoSet],
) -> dict[str | None, frozenset[PackagingType]]:
    """Map each theme to the distinct packaging types seen for it.

    A theme whose sets never name a packaging type still appears, with an
    empty set. Sets without a theme are grouped under ``None``.
    """
    groups: defaultdict[str | None, set[PackagingType]] = defaultdict(set)
    for s in records:
        types = groups[s.theme]
        if s.packaging_type is not None:
            types.add(s.packaging_type)
    return {theme: frozenset(types) for theme, types in groups.items()}
