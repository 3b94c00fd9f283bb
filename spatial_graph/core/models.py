"""
Core data models for spatial graph components.
"""

import math
from dataclasses import dataclass, field
from enum import Enum
from typing import List, Optional, Tuple

from .exceptions import SpatialGraphError


class IdMapping(str, Enum):
    """How external vertex ids are translated to internal indices."""
    EXPLICIT = "explicit"      # Lookup table built from the vertex records
    POSITIONAL = "positional"  # index = external_id - 1


class EdgeStatus(Enum):
    """Outcome of an edge insertion."""
    ADDED = "added"
    OUT_OF_RANGE = "out_of_range"
    SELF_LOOP = "self_loop"
    DUPLICATE = "duplicate"


@dataclass(frozen=True)
class Vertex:
    """A node record: external id plus 3D position."""
    external_id: int
    x: float = 0.0
    y: float = 0.0
    z: float = 0.0

    @property
    def coordinates(self) -> Tuple[float, float, float]:
        return (self.x, self.y, self.z)

    def distance_to(self, other: 'Vertex') -> float:
        """Euclidean distance between the two positions."""
        dx = self.x - other.x
        dy = self.y - other.y
        dz = self.z - other.z
        return math.sqrt(dx * dx + dy * dy + dz * dz)

    def __str__(self) -> str:
        return f"{self.external_id} ({self.x}, {self.y}, {self.z})"


@dataclass
class Edge:
    """Undirected weighted edge between two internal indices."""
    u: int
    v: int
    weight: float
    in_path: bool = False

    @property
    def endpoints(self) -> Tuple[int, int]:
        return (self.u, self.v)

    def other(self, index: int) -> int:
        """Return the endpoint opposite to ``index``."""
        return self.v if index == self.u else self.u

    def __str__(self) -> str:
        return f"{self.u} -- {self.v} ({self.weight:.2f})"


NO_PATH_DISTANCE = -1.0


@dataclass(frozen=True)
class PathResult:
    """
    Outcome of a shortest-path query.

    ``error`` is None when a path was found. Otherwise it holds the
    InvalidVertexError or NoPathError describing the failure, and the
    result carries the ``(-1, [])`` sentinel in ``distance``/``path``.
    """
    source: int
    target: int
    distance: float = NO_PATH_DISTANCE
    path: Tuple[int, ...] = field(default_factory=tuple)
    error: Optional[SpatialGraphError] = None

    @property
    def found(self) -> bool:
        return self.error is None

    @property
    def hop_count(self) -> int:
        return max(0, len(self.path) - 1)

    def to_tuple(self) -> Tuple[float, List[int]]:
        """Sentinel form used by the report and the path table."""
        if not self.found:
            return (NO_PATH_DISTANCE, [])
        return (self.distance, list(self.path))

    def format_path(self, separator: str = "->") -> str:
        return separator.join(str(v) for v in self.path)

    @classmethod
    def failure(cls, source: int, target: int, error: SpatialGraphError) -> 'PathResult':
        return cls(source=source, target=target, error=error)
