"""Hanging cable between two anchors, kept as a reusable list of points."""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterable, List, Optional

import numpy as np

from .catenary import create_catenary
from .config import CableSettings
from .vector import UP, Point, length


@dataclass
class Cable:
    """Cable whose natural length is the anchor distance plus ``slack``.

    ``points`` is owned by the cable and refilled in place on every
    :meth:`update_catenary`, so a renderer can hold on to the same list.
    """

    start: Optional[Iterable[float]] = None
    end: Optional[Iterable[float]] = None
    segments: int = 9
    slack: float = 0.2
    method: str = "newton"
    up: Iterable[float] = field(default_factory=lambda: UP.copy())
    points: List[Point] = field(default_factory=list)

    @classmethod
    def from_settings(
        cls,
        start: Optional[Iterable[float]],
        end: Optional[Iterable[float]],
        settings: CableSettings,
    ) -> "Cable":
        return cls(start=start, end=end, segments=settings.segments, slack=settings.slack, method=settings.method)

    def both_ends_exist(self) -> bool:
        return self.start is not None and self.end is not None

    @property
    def target_length(self) -> float:
        if not self.both_ends_exist():
            return 0.0
        span = np.asarray(self.end, dtype=float) - np.asarray(self.start, dtype=float)
        return length(span) + max(0.0, self.slack)

    def update_catenary(self) -> List[Point]:
        """Recompute ``points``; leaves them untouched when an anchor is missing."""

        if not self.both_ends_exist():
            return self.points
        create_catenary(
            self.points,
            self.start,  # type: ignore[arg-type]
            self.end,  # type: ignore[arg-type]
            max(1, self.segments),
            self.target_length,
            up=self.up,
            method=self.method,
        )
        return self.points


__all__ = ["Cable"]
