"""Configuration classes for pathnav components."""

from __future__ import annotations

from dataclasses import dataclass, fields
from typing import Any, Dict, Optional

import yaml

from pathnav.geo_helpers import DistanceMetric


@dataclass(frozen=True)
class NavigationConfig:
    """Settings shared by graph construction and path search.

    Attributes:
        metric: Distance metric for edge weights, the A* heuristic and
            nearest-node resolution. ``haversine`` treats coordinates as
            (longitude, latitude) degrees and measures kilometres;
            ``euclidean`` measures planar distance in input units.
        coordinate_precision: When set, coordinates are rounded to this many
            decimals before node identity is computed, so nearly-equal points
            collapse into one node. ``None`` keeps exact-value identity.
    """

    metric: DistanceMetric = DistanceMetric.HAVERSINE
    coordinate_precision: Optional[int] = None

    def __post_init__(self) -> None:
        # Accept plain strings such as "euclidean" from YAML/dicts
        if not isinstance(self.metric, DistanceMetric):
            object.__setattr__(self, "metric", DistanceMetric.parse(self.metric))
        self.validate()

    def validate(self) -> None:
        """Check field values.

        Raises:
            ValueError: If ``coordinate_precision`` is not a non-negative int.
        """
        precision = self.coordinate_precision
        if precision is not None:
            if isinstance(precision, bool) or not isinstance(precision, int):
                raise ValueError(
                    f"coordinate_precision must be an integer, got {precision!r}"
                )
            if precision < 0:
                raise ValueError(
                    f"coordinate_precision must be >= 0, got {precision}"
                )

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> NavigationConfig:
        """Build a config from a mapping, rejecting unknown keys.

        Args:
            data: Mapping of field name to value.

        Returns:
            NavigationConfig: The parsed configuration.

        Raises:
            ValueError: If ``data`` contains unrecognized keys or bad values.
        """
        allowed = {f.name for f in fields(cls)}
        for key in data:
            if key not in allowed:
                raise ValueError(f"Unrecognized key '{key}' in navigation config")
        return cls(**data)

    @classmethod
    def from_yaml(cls, yaml_str: str) -> NavigationConfig:
        """Build a config from a YAML string.

        A top-level ``navigation`` key is used when present; otherwise the whole
        document is treated as the config mapping. An empty document yields the
        defaults.

        Raises:
            ValueError: If the document (or its ``navigation`` section) is not a
                mapping.
        """
        data = yaml.safe_load(yaml_str)
        if data is None:
            return cls()
        if not isinstance(data, dict):
            raise ValueError("Top-level must be a dict in navigation config YAML.")

        section = data.get("navigation", data)
        if section is None:
            return cls()
        if not isinstance(section, dict):
            raise ValueError("'navigation' must be a dict if present.")
        return cls.from_dict(section)


# Global default configuration instance
DEFAULT_CONFIG = NavigationConfig()
