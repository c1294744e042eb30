"""NumPy vector helpers shared by the geometric utilities."""
from __future__ import annotations

import math
from typing import Iterable

import numpy as np

Point = np.ndarray

UP: Point = np.array([0.0, 1.0, 0.0])


# //1.- Convert iterables into fresh float arrays so callers never share buffers.
def as_point(components: Iterable[float]) -> Point:
    values = np.array(components, dtype=float)
    if values.shape != (3,):
        raise ValueError("a 3D point requires exactly three components")
    return values


# //2.- Squared distance avoids the square root when only ordering matters.
def sqr_distance(a: Iterable[float], b: Iterable[float]) -> float:
    delta = np.asarray(a, dtype=float) - np.asarray(b, dtype=float)
    return float(np.dot(delta, delta))


# //3.- Calculate the Euclidean length of a vector.
def length(vector: Iterable[float]) -> float:
    return float(np.linalg.norm(np.asarray(vector, dtype=float)))


# //4.- Normalize a vector guarding against zero length inputs.
def normalize(vector: Iterable[float], fallback: Iterable[float] = (0.0, 0.0, 0.0)) -> Point:
    values = np.asarray(vector, dtype=float)
    magnitude = np.linalg.norm(values)
    if magnitude == 0:
        return np.array(fallback, dtype=float)
    return values / magnitude


# //5.- Linearly interpolate between two points using parameter t.
def lerp(a: Iterable[float], b: Iterable[float], t: float) -> Point:
    start = np.asarray(a, dtype=float)
    end = np.asarray(b, dtype=float)
    return start + (end - start) * float(t)


def clamp01(value: float) -> float:
    if math.isnan(value):
        return 0.0
    return min(1.0, max(0.0, float(value)))


__all__ = ["Point", "UP", "as_point", "sqr_distance", "length", "normalize", "lerp", "clamp01"]
