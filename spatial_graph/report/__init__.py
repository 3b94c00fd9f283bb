"""
Report rendering for analysis results.
"""

from .console_report import format_report, print_report

__all__ = [
    'format_report',
    'print_report',
]
