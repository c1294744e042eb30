"""Pick items out of collections by position or at random."""
from __future__ import annotations

import random
from typing import Callable, Iterable, Optional, Sequence, TypeVar

from .vector import sqr_distance

T = TypeVar("T")


# //1.- Rank candidates by squared distance; the root is not needed for ordering.
def get_closest(
    items: Optional[Iterable[T]],
    to_point: Iterable[float],
    *,
    key: Optional[Callable[[T], Iterable[float]]] = None,
) -> Optional[T]:
    """Return the item nearest to ``to_point``.

    ``key`` maps an item to its position; without it the items are taken to
    be positions themselves. Empty or missing collections give ``None``.
    """

    if items is None:
        return None
    target = tuple(float(component) for component in to_point)
    position = key or (lambda item: item)  # type: ignore[assignment, return-value]
    closest: Optional[T] = None
    closest_distance = float("inf")
    for item in items:
        distance = sqr_distance(position(item), target)
        if distance < closest_distance:
            closest_distance = distance
            closest = item
    return closest


# //2.- Draw a uniformly random element, optionally from a seeded generator.
def get_random(items: Sequence[T], rng: Optional[random.Random] = None) -> T:
    if not items:
        raise IndexError("cannot pick from an empty sequence")
    generator = rng or random
    return items[generator.randrange(len(items))]


__all__ = ["get_closest", "get_random"]
