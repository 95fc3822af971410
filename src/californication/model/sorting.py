"""
Sort modes for the place list.
"""
from __future__ import annotations

from enum import IntEnum
from typing import Iterable, List

from californication.model.place import Place


class SortMode(IntEnum):
    """Orderings offered in the sort menu. The values are persisted."""
    NAME = 0
    RATING = 1

    @property
    def label(self) -> str:
        return SORT_MODE_LABELS[self]


SORT_MODE_LABELS = {
    SortMode.NAME: "By name",
    SortMode.RATING: "By rating",
}

DEFAULT_SORT_MODE = SortMode.RATING


def sort_by_name(places: Iterable[Place]) -> List[Place]:
    return sorted(places, key=lambda p: p.name)


def sort_by_rating(places: Iterable[Place]) -> List[Place]:
    # Second stable pass keeps the name order among equal ratings
    return sorted(sort_by_name(places), key=lambda p: p.rating, reverse=True)


def sorted_places(places: Iterable[Place], mode: SortMode) -> List[Place]:
    """Return a new list of `places` ordered according to `mode`."""
    if mode == SortMode.NAME:
        return sort_by_name(places)
    if mode == SortMode.RATING:
        return sort_by_rating(places)
    raise ValueError(f"Unknown sort mode: {mode!r}")
