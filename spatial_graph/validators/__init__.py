"""
Validators package for run diagnostics.
"""

from .validation_result import (
    BUILDER,
    EXPORT,
    LOADER,
    PATH_QUERY,
    Diagnostic,
    Severity,
    ValidationResult,
)

__all__ = [
    'ValidationResult',
    'Diagnostic',
    'Severity',
    'LOADER',
    'BUILDER',
    'PATH_QUERY',
    'EXPORT',
]
