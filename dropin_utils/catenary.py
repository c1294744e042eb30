"""Catenary sampling for cables hanging between two anchors.

The solver follows the closed-form parameterisation of a catenary through two
points of possibly different height with a fixed arc length. Only the shape
parameter ``s`` has no closed form; it is found from

    sinh(s) / s = sqrt(L^2 - h^2) / d

where ``L`` is the rope length, ``h`` the height difference along the up axis
and ``d`` the horizontal distance. Everything else follows directly::

    a = d / (2 s)
    p = (d - a ln((L + h) / (L - h))) / 2
    q = (h - L coth(s)) / 2
    y(x) = a cosh((x - p) / a) + q

Degenerate requests never raise. A rope that cannot sag (too short, or a
single segment) comes back as the two anchors, and anchors without horizontal
separation come back as a straight line.
"""
from __future__ import annotations

import logging
import math
from typing import Iterable, List, MutableSequence, Sequence

import numpy as np

from .vector import UP, Point, as_point, length, lerp, normalize

LOGGER = logging.getLogger(__name__)

# Smallest shape parameter handed out; also the step of the linear search.
MIN_SHAPE_PARAMETER = 0.001
# sinh overflows a double a little above 710.
MAX_SHAPE_PARAMETER = 700.0
# Ratios above this describe an (almost) vertical rope; hyperbolic terms would overflow.
MAX_SHAPE_RATIO = 1.0e6

SOLVER_METHODS = ("newton", "step")


def _sinhc(s: float) -> float:
    return math.sinh(s) / s


def _log_sinhc_derivative(s: float) -> float:
    return math.cosh(s) / math.sinh(s) - 1.0 / s


def _solve_by_stepping(ratio: float) -> float:
    s = 0.0
    while True:
        s += MIN_SHAPE_PARAMETER
        if _sinhc(s) >= ratio or s >= MAX_SHAPE_PARAMETER:
            return s


def _solve_by_newton(ratio: float, tolerance: float) -> float:
    # //1.- Bracket the root; sinh(s)/s grows monotonically for s > 0.
    low = MIN_SHAPE_PARAMETER
    if _sinhc(low) >= ratio:
        return low
    # sinh(s)/s > 1 + s^2/6, so this is always an upper bound.
    high = min(MAX_SHAPE_PARAMETER, max(2.0 * low, math.sqrt(6.0 * (ratio - 1.0))))
    if _sinhc(high) < ratio:
        return MAX_SHAPE_PARAMETER

    # //2.- Newton on log(sinh(s)/s) converges from far out; steps leaving the bracket bisect.
    target = math.log(ratio)
    value = 0.5 * (low + high)
    for _ in range(200):
        error = math.log(_sinhc(value)) - target
        if abs(error) <= tolerance:
            return value
        if error > 0.0:
            high = value
        else:
            low = value
        slope = _log_sinhc_derivative(value)
        candidate = value - error / slope if slope > 0.0 else 0.5 * (low + high)
        if candidate <= low or candidate >= high:
            candidate = 0.5 * (low + high)
        value = candidate
        if high - low <= tolerance * value:
            break
    return value


def solve_shape_parameter(ratio: float, *, method: str = "newton", tolerance: float = 1e-12) -> float:
    """Return ``s`` such that ``sinh(s) / s`` matches ``ratio``.

    ``method="newton"`` runs a safeguarded Newton-Raphson inside a shrinking
    bisection bracket. ``method="step"`` walks ``s`` upward in increments of
    :data:`MIN_SHAPE_PARAMETER` until the ratio is reached, which bounds the
    precision to that step. Both methods return at least
    :data:`MIN_SHAPE_PARAMETER` so ``coth(s)`` stays finite for nearly taut
    ropes.
    """

    if method not in SOLVER_METHODS:
        raise ValueError(f"unknown catenary solver method {method!r}")
    if method == "step":
        return _solve_by_stepping(ratio)
    return _solve_by_newton(ratio, tolerance)


def _fill_straight(points: MutableSequence[Point], p1: Point, p2: Point, segments: int) -> None:
    for index in range(segments + 1):
        points.append(lerp(p1, p2, index / segments))
    points[0] = p1.copy()
    points[-1] = p2.copy()


def create_catenary(
    points: MutableSequence[Point],
    p1: Iterable[float],
    p2: Iterable[float],
    segments: int,
    target_length: float,
    *,
    up: Iterable[float] = UP,
    method: str = "newton",
) -> MutableSequence[Point]:
    """Fill ``points`` with a catenary from ``p1`` to ``p2``.

    ``points`` is cleared and overwritten, then returned for convenience. If
    the anchors are at least ``target_length`` apart, or only one segment is
    requested, it receives just ``[p1, p2]``.
    """

    if method not in SOLVER_METHODS:
        raise ValueError(f"unknown catenary solver method {method!r}")

    start = as_point(p1)
    end = as_point(p2)
    segments = max(1, int(segments))
    rope = float(target_length)
    axis = normalize(up, UP)

    diff = end - start
    del points[:]

    # Fully taut
    if segments == 1 or length(diff) >= rope:
        LOGGER.debug("catenary is taut, emitting straight segment (length %.4f)", rope)
        points.append(start)
        points.append(end)
        return points

    y_diff = float(np.dot(diff, axis))
    planar = diff - axis * y_diff
    x_diff = length(planar)

    ratio = math.sqrt(rope * rope - y_diff * y_diff) / x_diff if x_diff > 0.0 else math.inf
    if ratio > MAX_SHAPE_RATIO:
        LOGGER.debug("anchors share no horizontal span, emitting straight line")
        _fill_straight(points, start, end, segments)
        return points

    s = solve_shape_parameter(ratio, method=method)
    a = x_diff / s / 2.0
    p = (x_diff - a * math.log((rope + y_diff) / (rope - y_diff))) / 2.0
    q = (y_diff - rope * (math.cosh(s) / math.sinh(s))) / 2.0

    for index in range(segments + 1):
        t = index / segments
        x = x_diff * index / segments
        # from: https://en.wikipedia.org/wiki/Catenary#Determining_parameters
        y = a * math.cosh((x - p) / a) + q
        points.append(start + planar * t + axis * y)

    points[0] = start.copy()
    points[-1] = end.copy()
    return points


def catenary_points(
    p1: Iterable[float],
    p2: Iterable[float],
    segments: int,
    target_length: float,
    **kwargs: object,
) -> np.ndarray:
    """Return the sampled catenary as a ``(n, 3)`` array."""

    points: List[Point] = []
    create_catenary(points, p1, p2, segments, target_length, **kwargs)  # type: ignore[arg-type]
    return np.vstack(points)


def catenary_length(points: Sequence[Iterable[float]]) -> float:
    """Polyline length of a sampled curve."""

    if len(points) < 2:
        return 0.0
    samples = np.asarray(points, dtype=float)
    return float(np.sum(np.linalg.norm(np.diff(samples, axis=0), axis=1)))


__all__ = [
    "MIN_SHAPE_PARAMETER",
    "SOLVER_METHODS",
    "solve_shape_parameter",
    "create_catenary",
    "catenary_points",
    "catenary_length",
]
