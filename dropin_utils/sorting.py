"""Sort one list by the values held in a parallel list."""
from __future__ import annotations

from typing import Any, List, MutableSequence, TypeVar

T = TypeVar("T")


def twin_sort(target: MutableSequence[T], sorter: MutableSequence[Any]) -> None:
    """Sort ``target`` and ``sorter`` in place, ordered by ``sorter``.

    Handy when the sort keys were computed up front (distances to a camera,
    for instance) and live in their own list. Both lists end up sorted by
    key; equal keys keep their relative order.
    """

    if len(target) != len(sorter):
        raise ValueError(
            f"twin_sort lists must be of equal length, got {len(target)} and {len(sorter)}"
        )
    order: List[int] = sorted(range(len(sorter)), key=sorter.__getitem__)
    target[:] = [target[index] for index in order]
    sorter[:] = [sorter[index] for index in order]


__all__ = ["twin_sort"]
