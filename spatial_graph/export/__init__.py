"""
Exporters consuming analysis results.
"""

from .path_table import write_path_table, format_row, compute_path_rows

__all__ = [
    'write_path_table',
    'format_row',
    'compute_path_rows',
]
