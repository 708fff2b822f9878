"""Shared geometry fixtures.

Fixtures return GeoJSON-like FeatureCollections the way a drawing layer hands
them over. Coordinates are small integers so euclidean costs are easy to check
by hand.
"""

from __future__ import annotations

from typing import Any, Dict, List, Sequence

import pytest


def line(*coords: Sequence[float]) -> Dict[str, Any]:
    return {
        "type": "Feature",
        "properties": {},
        "geometry": {"type": "LineString", "coordinates": [list(c) for c in coords]},
    }


def collection(*features: Dict[str, Any]) -> Dict[str, Any]:
    return {"type": "FeatureCollection", "features": list(features)}


@pytest.fixture
def l_shape() -> Dict[str, Any]:
    # (0,0)──(1,0)──(2,0)
    #                 │
    #               (2,1)
    return collection(
        line((0, 0), (1, 0), (2, 0)),
        line((2, 0), (2, 1)),
    )


@pytest.fixture
def two_islands() -> Dict[str, Any]:
    # Two components with no shared coordinate
    return collection(
        line((0, 0), (1, 0)),
        line((10, 10), (11, 10)),
    )


@pytest.fixture
def square_with_detour() -> Dict[str, Any]:
    # (0,1)───(1,1)
    #   │       │
    # (0,0)───(1,0)─────────(6,0)
    # plus a longer bypass (0,1) -> (3,3) -> (6,0)
    return collection(
        line((0, 1), (1, 1), (1, 0), (0, 0), (0, 1)),
        line((1, 0), (6, 0)),
        line((0, 1), (3, 3), (6, 0)),
    )


@pytest.fixture
def mixed_kinds() -> Dict[str, Any]:
    return collection(
        line((0, 0), (1, 0)),
        {"type": "Feature", "geometry": {"type": "Point", "coordinates": [5, 5]}},
        {
            "type": "Feature",
            "geometry": {
                "type": "Polygon",
                "coordinates": [[[0, 0], [1, 0], [1, 1], [0, 0]]],
            },
        },
        {"type": "Feature", "geometry": None},
    )


def grid_features(size: int) -> List[Dict[str, Any]]:
    """Row and column chains of a size x size lattice with unit spacing."""
    feats = []
    for i in range(size):
        feats.append(line(*[(x, i) for x in range(size)]))
        feats.append(line(*[(i, y) for y in range(size)]))
    return feats


@pytest.fixture
def make_collection():
    """Factory: each positional argument is one chain's coordinate list."""

    def _make(*chains: Sequence[Sequence[float]]) -> Dict[str, Any]:
        return collection(*(line(*chain) for chain in chains))

    return _make


@pytest.fixture
def grid_5() -> Dict[str, Any]:
    return collection(*grid_features(5))


@pytest.fixture
def planar():
    from pathnav.config import NavigationConfig

    return NavigationConfig(metric="euclidean")
