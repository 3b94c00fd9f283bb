"""
Core components for spatial graph modeling.

This package provides the fundamental data structures, interfaces and
exceptions shared by the graph store, the analyzers and the exporters.
"""

from .models import Vertex, Edge, EdgeStatus, IdMapping, PathResult, NO_PATH_DISTANCE
from .exceptions import (
    SpatialGraphError,
    EmptyInputError,
    DuplicateVertexError,
    InvalidVertexError,
    NoPathError,
    ResourceError,
    RecordLoadError,
    ConfigurationError,
)

__all__ = [
    'Vertex',
    'Edge',
    'EdgeStatus',
    'IdMapping',
    'PathResult',
    'NO_PATH_DISTANCE',
    'SpatialGraphError',
    'EmptyInputError',
    'DuplicateVertexError',
    'InvalidVertexError',
    'NoPathError',
    'ResourceError',
    'RecordLoadError',
    'ConfigurationError',
]
