"""Geometry ingestion: turn drawn GeoJSON-like input into coordinate chains.

Only line geometries contribute chains. Each ``LineString`` is one chain; each
member of a ``MultiLineString`` is its own chain; ``GeometryCollection``
members are inspected recursively. Every other geometry kind is ignored.
"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass, field
from enum import Enum
from math import isfinite
from numbers import Real
from typing import Any, Dict, Iterable, Iterator, List, Tuple

from pathnav.geo_helpers import Coordinate
from pathnav.logging import get_logger

logger = get_logger(__name__)

Chain = Tuple[Coordinate, ...]


class MalformedGeometryError(ValueError):
    """Raised when a line geometry cannot be turned into a usable chain."""


class GeometryKind(str, Enum):
    """GeoJSON geometry kinds, plus a catch-all for anything unrecognized."""

    POINT = "Point"
    MULTI_POINT = "MultiPoint"
    LINE_STRING = "LineString"
    MULTI_LINE_STRING = "MultiLineString"
    POLYGON = "Polygon"
    MULTI_POLYGON = "MultiPolygon"
    GEOMETRY_COLLECTION = "GeometryCollection"
    UNKNOWN = "Unknown"

    @classmethod
    def of(cls, geometry: Dict[str, Any]) -> GeometryKind:
        try:
            return cls(geometry.get("type"))
        except ValueError:
            return cls.UNKNOWN


@dataclass
class ChainParseResult:
    """Outcome of scanning an input collection for chains.

    Attributes:
        chains: Validated chains, in input order.
        skipped: Number of line geometries dropped as malformed.
        ignored: Number of geometries of a non-line kind.
    """

    chains: List[Chain] = field(default_factory=list)
    skipped: int = 0
    ignored: int = 0


def coerce_coordinate(raw: Any) -> Coordinate:
    """Return ``raw`` as an ``(x, y)`` float pair or raise MalformedGeometryError."""
    if isinstance(raw, (str, bytes)) or not isinstance(raw, Sequence):
        raise MalformedGeometryError(f"Coordinate must be a sequence, got {raw!r}")
    if len(raw) < 2:
        raise MalformedGeometryError(f"Coordinate needs two components, got {raw!r}")

    pair = []
    for value in (raw[0], raw[1]):
        if isinstance(value, bool) or not isinstance(value, Real):
            raise MalformedGeometryError(f"Non-numeric coordinate value in {raw!r}")
        try:
            value = float(value)
        except (OverflowError, TypeError, ValueError):
            raise MalformedGeometryError(
                f"Coordinate value out of range in {raw!r}"
            ) from None
        if not isfinite(value):
            raise MalformedGeometryError(f"Non-finite coordinate value in {raw!r}")
        pair.append(value)
    return pair[0], pair[1]


def validate_chain(raw: Any) -> Chain:
    """Validate a raw coordinate list and return it as a chain.

    Components beyond the second (e.g. altitude) are dropped.

    Args:
        raw: Sequence of coordinate sequences.

    Returns:
        Chain: Tuple of ``(x, y)`` float pairs.

    Raises:
        MalformedGeometryError: If ``raw`` is not a list of at least two
            coordinates with finite numeric components.
    """
    if raw is None:
        raise MalformedGeometryError("Line geometry has no coordinates")
    if isinstance(raw, (str, bytes, dict)) or not isinstance(raw, Iterable):
        raise MalformedGeometryError(f"Coordinates must be a list, got {raw!r}")

    chain = tuple(coerce_coordinate(item) for item in raw)
    if len(chain) < 2:
        raise MalformedGeometryError(
            f"Line geometry needs at least 2 coordinates, got {len(chain)}"
        )
    return chain


def iter_geometries(data: Any) -> Iterator[Dict[str, Any]]:
    """Yield bare geometry dicts from a FeatureCollection, Feature(s) or geometries.

    Features with a ``null`` geometry are dropped. Entries that are not
    mappings are yielded as an empty geometry so callers count them as ignored.
    """
    if data is None:
        return
    if isinstance(data, dict):
        entry_type = data.get("type")
        if entry_type == "FeatureCollection":
            entries = data.get("features") or []
        else:
            entries = [data]
    else:
        entries = data

    for entry in entries:
        if not isinstance(entry, dict):
            yield {}
            continue
        if entry.get("type") == "Feature":
            geometry = entry.get("geometry")
            if geometry is None:
                continue
            yield geometry if isinstance(geometry, dict) else {}
        else:
            yield entry


def _collect(geometry: Dict[str, Any], result: ChainParseResult) -> None:
    kind = GeometryKind.of(geometry)

    if kind is GeometryKind.LINE_STRING:
        _append_chain(geometry.get("coordinates"), result)
    elif kind is GeometryKind.MULTI_LINE_STRING:
        lines = geometry.get("coordinates")
        if not isinstance(lines, list):
            logger.warning("Skipping MultiLineString without a coordinate list")
            result.skipped += 1
            return
        for line in lines:
            _append_chain(line, result)
    elif kind is GeometryKind.GEOMETRY_COLLECTION:
        for member in geometry.get("geometries") or []:
            if isinstance(member, dict):
                _collect(member, result)
            else:
                result.ignored += 1
    else:
        logger.debug("Ignoring geometry of kind %s", geometry.get("type"))
        result.ignored += 1


def _append_chain(raw: Any, result: ChainParseResult) -> None:
    try:
        result.chains.append(validate_chain(raw))
    except MalformedGeometryError as exc:
        logger.warning("Skipping malformed line geometry: %s", exc)
        result.skipped += 1


def parse_chains(data: Any) -> ChainParseResult:
    """Extract every valid chain from ``data``.

    Malformed line geometries are skipped individually; the scan never aborts.

    Args:
        data: A GeoJSON FeatureCollection dict, a single Feature or geometry
            dict, or an iterable of Features/geometries.

    Returns:
        ChainParseResult: Valid chains plus skip/ignore counters.
    """
    result = ChainParseResult()
    for geometry in iter_geometries(data):
        _collect(geometry, result)
    return result
