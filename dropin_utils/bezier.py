"""Cubic Bezier evaluation, subdivision and closest point search."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Sequence, Tuple

import numpy as np

from .vector import Point, as_point, sqr_distance


def bezier_point(start: Point, start_tangent: Point, end_tangent: Point, end: Point, t: float) -> Point:
    s = 1.0 - t
    return start * s * s * s + start_tangent * s * s * t * 3.0 + end_tangent * s * t * t * 3.0 + end * t * t * t


def bezier_tangent(a: Point, b: Point, c: Point, d: Point, t: float) -> Point:
    """Derivative of the curve with control points ``a, b, c, d`` at ``t``."""

    c1 = d - 3.0 * c + 3.0 * b - a
    c2 = 3.0 * c - 6.0 * b + 3.0 * a
    c3 = 3.0 * b - 3.0 * a
    return 3.0 * c1 * t * t + 2.0 * c2 * t + c3


@dataclass(frozen=True)
class BezierCurve:
    """Cubic Bezier segment; tangents are the two inner control points."""

    start: Point
    start_tangent: Point
    end_tangent: Point
    end: Point

    @classmethod
    def from_points(
        cls,
        start: Iterable[float],
        start_tangent: Iterable[float],
        end_tangent: Iterable[float],
        end: Iterable[float],
    ) -> "BezierCurve":
        return cls(as_point(start), as_point(start_tangent), as_point(end_tangent), as_point(end))

    def point_at(self, t: float) -> Point:
        return bezier_point(self.start, self.start_tangent, self.end_tangent, self.end, t)

    def tangent_at(self, t: float) -> Point:
        return bezier_tangent(self.start, self.start_tangent, self.end_tangent, self.end, t)

    def split(self, t: float = 0.5) -> Tuple["BezierCurve", "BezierCurve"]:
        return split_bezier(t, self.start, self.end, self.start_tangent, self.end_tangent)

    def closest_point(self, point: Iterable[float], sqr_error: float = 0.001) -> Tuple[Point, float]:
        return closest_point_on_curve(
            as_point(point), self.start, self.end, self.start_tangent, self.end_tangent, sqr_error
        )


def split_bezier(
    t: float,
    start: Point,
    end: Point,
    start_tangent: Point,
    end_tangent: Point,
) -> Tuple[BezierCurve, BezierCurve]:
    """Split a curve at ``t`` with de Casteljau's construction."""

    # //1.- First level: points on the three control polygon edges.
    tangent_point0 = start + (start_tangent - start) * t
    tangent_point1 = end + (end_tangent - end) * (1.0 - t)
    edge_point = start_tangent + (end_tangent - start_tangent) * t

    # //2.- Second level and the split point itself.
    new_tangent0 = tangent_point0 + (edge_point - tangent_point0) * t
    new_tangent1 = tangent_point1 + (edge_point - tangent_point1) * (1.0 - t)
    split_point = new_tangent0 + (new_tangent1 - new_tangent0) * t

    left = BezierCurve(start, tangent_point0, new_tangent0, split_point)
    right = BezierCurve(split_point, new_tangent1, tangent_point1, end)
    return left, right


def _colinear(v1: Point, v2: Point, error: float) -> bool:
    cross = np.cross(v1, v2)
    return float(np.dot(cross, cross)) < error


def _closest_point_to_segment(point: Point, segment_start: Point, segment_end: Point) -> Tuple[Point, float]:
    segment = segment_end - segment_start
    length = float(np.linalg.norm(segment))
    if length == 0.0:
        return segment_start.copy(), 0.0
    dot = float(np.dot(point - segment_start, segment / length))
    dot = min(max(dot, 0.0), length)
    t = dot / length
    return segment_start + segment * t, t


def _sqr_distance_to_polyline(point: Point, points: Sequence[Point]) -> float:
    best = float("inf")
    for first, second in zip(points, points[1:]):
        closest, _ = _closest_point_to_segment(point, first, second)
        best = min(best, sqr_distance(point, closest))
    return best


def _closest_point_iterative(
    point: Point,
    curve: BezierCurve,
    sqr_error: float,
    start_t: float,
    end_t: float,
) -> Tuple[Point, float]:
    while sqr_distance(curve.start, curve.end) > sqr_error:
        chord = curve.end - curve.start
        if _colinear(curve.start_tangent - curve.start, chord, sqr_error) and _colinear(
            curve.end_tangent - curve.end, chord, sqr_error
        ):
            closest, local_t = _closest_point_to_segment(point, curve.start, curve.end)
            return closest, start_t + local_t * (end_t - start_t)

        left, right = curve.split(0.5)
        # //1.- Compare the point against each half's control polygon and keep the nearer half.
        left_distance = _sqr_distance_to_polyline(point, (left.start, left.start_tangent, left.end_tangent))
        right_distance = _sqr_distance_to_polyline(point, (right.end, right.end_tangent, right.start_tangent))
        if left_distance < right_distance:
            curve = left
            end_t -= (end_t - start_t) * 0.5
        else:
            curve = right
            start_t += (end_t - start_t) * 0.5

    return curve.end, end_t


def closest_point_on_curve(
    point: Point,
    start: Point,
    end: Point,
    start_tangent: Point,
    end_tangent: Point,
    sqr_error: float = 0.001,
) -> Tuple[Point, float]:
    """Approximate the point on the curve closest to ``point``.

    Returns the point and its curve parameter ``t``. The search splits the
    curve in half, refines each half by repeated subdivision and keeps the
    better of the two, so a point near the middle of an S-shaped curve is
    not trapped in the wrong lobe.
    """

    curve = BezierCurve(start, start_tangent, end_tangent, end)
    chord = end - start
    if _colinear(start_tangent - start, chord, sqr_error) and _colinear(end_tangent - end, chord, sqr_error):
        return _closest_point_to_segment(point, start, end)

    left, right = curve.split(0.5)
    left_point, left_t = _closest_point_iterative(point, left, sqr_error, 0.0, 0.5)
    right_point, right_t = _closest_point_iterative(point, right, sqr_error, 0.5, 1.0)
    if sqr_distance(point, left_point) < sqr_distance(point, right_point):
        return left_point, left_t
    return right_point, right_t


__all__ = [
    "BezierCurve",
    "bezier_point",
    "bezier_tangent",
    "split_bezier",
    "closest_point_on_curve",
]
