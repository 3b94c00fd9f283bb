"""
Configuration package for spatial graph analysis.
"""

from .analysis_config import AnalysisConfig, DEFAULT_NODE_PAIRS

__all__ = [
    'AnalysisConfig',
    'DEFAULT_NODE_PAIRS',
]
