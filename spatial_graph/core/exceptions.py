"""
Custom exceptions for the spatial graph package.
"""

from typing import Any, Dict, Optional


class SpatialGraphError(Exception):
    """Base exception class for spatial graph errors."""

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        super().__init__(message)
        self.message = message
        self.details = details or {}

    def __str__(self) -> str:
        if self.details:
            details_str = ", ".join(f"{k}={v}" for k, v in self.details.items())
            return f"{self.message} ({details_str})"
        return self.message


class EmptyInputError(SpatialGraphError):
    """Raised when a graph is built from an empty vertex sequence."""
    pass


class DuplicateVertexError(SpatialGraphError):
    """Raised when two vertex records share the same external id."""

    def __init__(self, external_id: int, first_index: int, second_index: int):
        super().__init__(
            f"Duplicate vertex id {external_id}",
            details={'first_index': first_index, 'second_index': second_index},
        )
        self.external_id = external_id


class InvalidVertexError(SpatialGraphError):
    """Raised when an external id does not map to a vertex of the graph."""

    def __init__(self, external_id: Any, vertex_count: Optional[int] = None):
        details = {'vertex_count': vertex_count} if vertex_count is not None else {}
        super().__init__(f"Invalid vertex id {external_id}", details=details)
        self.external_id = external_id


class NoPathError(SpatialGraphError):
    """Source and target are valid vertices but lie in different components."""

    def __init__(self, source: int, target: int):
        super().__init__(f"No path between {source} and {target}")
        self.source = source
        self.target = target


class ResourceError(SpatialGraphError):
    """Raised when an output destination cannot be created or written."""

    def __init__(self, message: str, path: Optional[str] = None, details: Optional[Dict[str, Any]] = None):
        details = dict(details or {})
        if path:
            details['path'] = path
        super().__init__(message, details=details)
        self.path = path


class RecordLoadError(SpatialGraphError):
    """Raised when an input record file cannot be read."""

    def __init__(self, message: str, path: Optional[str] = None):
        super().__init__(message, details={'path': path} if path else None)
        self.path = path


class ConfigurationError(SpatialGraphError):
    """Raised when configuration is invalid or missing."""
    pass
