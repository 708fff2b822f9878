"""Distance functions over (x, y) coordinates.

Coordinates follow GeoJSON order: ``(longitude, latitude)`` for the haversine
metric and ``(x, y)`` for the euclidean one. Results are never rounded, so
edge weights and the A* heuristic computed here stay mutually consistent.
"""

from __future__ import annotations

from enum import Enum
from math import asin, cos, hypot, radians, sin, sqrt
from typing import Callable, Sequence, Tuple

import numpy as np

EARTH_RADIUS_KM = 6371.0  # https://en.wikipedia.org/wiki/Earth_radius

Coordinate = Tuple[float, float]
DistanceFunc = Callable[[Sequence[float], Sequence[float]], float]


class DistanceMetric(str, Enum):
    """Supported distance metrics."""

    HAVERSINE = "haversine"
    EUCLIDEAN = "euclidean"

    @classmethod
    def parse(cls, value: object) -> DistanceMetric:
        """Resolve a metric from an enum member or a case-insensitive name.

        Raises:
            ValueError: If ``value`` names no known metric.
        """
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            try:
                return cls(value.strip().lower())
            except ValueError:
                pass
        valid = ", ".join(m.value for m in cls)
        raise ValueError(f"Unknown distance metric {value!r}; expected one of: {valid}")


def haversine(a: Sequence[float], b: Sequence[float]) -> float:
    """
    Great-circle distance in kilometres between two (lon, lat) points in degrees.
    https://en.wikipedia.org/wiki/Haversine_formula
    """
    lon1, lat1 = radians(a[0]), radians(a[1])
    lon2, lat2 = radians(b[0]), radians(b[1])

    dlon = lon2 - lon1
    dlat = lat2 - lat1
    h = sin(dlat / 2) ** 2 + cos(lat1) * cos(lat2) * sin(dlon / 2) ** 2
    # Rounding can push h slightly outside [0, 1]
    return 2 * EARTH_RADIUS_KM * asin(sqrt(max(0.0, min(1.0, h))))


def euclidean(a: Sequence[float], b: Sequence[float]) -> float:
    """Planar distance between two (x, y) points."""
    return hypot(b[0] - a[0], b[1] - a[1])


_DISTANCE_FUNCS = {
    DistanceMetric.HAVERSINE: haversine,
    DistanceMetric.EUCLIDEAN: euclidean,
}


def get_distance_func(metric: DistanceMetric | str) -> DistanceFunc:
    """Return the scalar distance function for ``metric``."""
    return _DISTANCE_FUNCS[DistanceMetric.parse(metric)]


def distance(
    a: Sequence[float],
    b: Sequence[float],
    metric: DistanceMetric | str = DistanceMetric.HAVERSINE,
) -> float:
    """Distance between ``a`` and ``b`` under ``metric``."""
    return get_distance_func(metric)(a, b)


def distances_from(
    origin: Sequence[float],
    xs: np.ndarray,
    ys: np.ndarray,
    metric: DistanceMetric | str = DistanceMetric.HAVERSINE,
) -> np.ndarray:
    """Vectorized distance from ``origin`` to every point ``(xs[i], ys[i])``.

    Args:
        origin: Query point.
        xs: Array of x (longitude) values.
        ys: Array of y (latitude) values, same shape as ``xs``.
        metric: Distance metric.

    Returns:
        np.ndarray: Distances, one per point, in the metric's units.
    """
    metric = DistanceMetric.parse(metric)
    if metric is DistanceMetric.EUCLIDEAN:
        return np.hypot(xs - origin[0], ys - origin[1])

    lon1, lat1 = np.radians(origin[0]), np.radians(origin[1])
    lon2, lat2 = np.radians(xs), np.radians(ys)
    h = (
        np.sin((lat2 - lat1) / 2) ** 2
        + np.cos(lat1) * np.cos(lat2) * np.sin((lon2 - lon1) / 2) ** 2
    )
    return 2 * EARTH_RADIUS_KM * np.arcsin(np.sqrt(np.clip(h, 0.0, 1.0)))
