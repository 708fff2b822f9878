from math import ceil, isclose

import numpy as np
import pytest

from pathnav import geo_helpers
from pathnav.geo_helpers import DistanceMetric


def test_haversine_san_jose_new_york():
    san_jose = (-121.8863, 37.3382)
    new_york = (-74.0060, 40.7128)
    assert ceil(geo_helpers.haversine(san_jose, new_york)) == 4102


def test_haversine_symmetric_and_zero():
    a, b = (10.0, 20.0), (11.5, 19.0)
    assert geo_helpers.haversine(a, b) == pytest.approx(geo_helpers.haversine(b, a))
    assert geo_helpers.haversine(a, a) == 0.0


def test_euclidean():
    assert geo_helpers.euclidean((0, 0), (3, 4)) == 5.0


def test_distance_dispatch():
    assert geo_helpers.distance((0, 0), (3, 4), "euclidean") == 5.0
    assert geo_helpers.get_distance_func(DistanceMetric.HAVERSINE) is geo_helpers.haversine
    with pytest.raises(ValueError):
        geo_helpers.get_distance_func("chebyshev")


@pytest.mark.parametrize("metric", list(DistanceMetric))
def test_vectorized_matches_scalar(metric):
    origin = (2.35, 48.85)
    xs = np.array([2.35, -0.12, 13.4, 2.0])
    ys = np.array([48.85, 51.5, 52.52, 48.0])
    vec = geo_helpers.distances_from(origin, xs, ys, metric)
    scalar = [geo_helpers.distance(origin, (x, y), metric) for x, y in zip(xs, ys)]
    assert len(vec) == 4
    for v, s in zip(vec, scalar):
        assert isclose(v, s, rel_tol=1e-9, abs_tol=1e-9)


@pytest.mark.parametrize(
    "a, b",
    [
        ((0.0, 0.0), (180.0, 0.0)),
        ((-90.0, 45.0), (90.0, -45.0)),
        ((12.34, 0.0), (12.34, 0.0)),
    ],
)
def test_haversine_stays_finite_at_extremes(a, b):
    scalar = geo_helpers.haversine(a, b)
    vec = geo_helpers.distances_from(a, np.array([b[0]]), np.array([b[1]]))
    assert 0.0 <= scalar <= np.pi * geo_helpers.EARTH_RADIUS_KM + 1e-6
    assert np.isfinite(vec).all()
    assert isclose(vec[0], scalar, rel_tol=1e-9, abs_tol=1e-9)
