"""
Spatial Graph Package - Weighted Spatial Graph Analysis

Builds an undirected graph from vertex records carrying 3D coordinates and
edge records naming pairs of vertices, weights every edge with the Euclidean
distance between its endpoints, and analyzes the result.

Key Features:
- Vertex degrees and graph degree
- Connectivity (breadth-first component labelling)
- Cycle detection (depth-first traversal)
- Shortest paths (Dijkstra)
- Graphviz diagram with the shortest path highlighted
- Path table export for a list of node pairs

Architecture:
- core/: Base models, interfaces, and exceptions
- graph/: Graph store, builder, analyzers and visualization
- config/: Configuration management
- loaders/: Node and edge record files
- export/: Path table writer
- report/: Text and console report
- validators/: Diagnostics collected during a run

Example Usage:
    from spatial_graph import SpatialGraph

    graph = SpatialGraph.from_files("nodes.csv", "edges.csv")
    report = graph.analyze(source=1, target=5)
    print(graph.get_report(report))
    graph.export(diagram_path="graph.dot", paths_csv="paths.csv")
"""

import logging

# Core models and exceptions
from .core.models import Vertex, Edge, EdgeStatus, IdMapping, PathResult
from .core.exceptions import (
    SpatialGraphError,
    EmptyInputError,
    DuplicateVertexError,
    InvalidVertexError,
    NoPathError,
    ResourceError,
    RecordLoadError,
    ConfigurationError,
)
from .config.analysis_config import AnalysisConfig

# Graph store and analysis; must precede the exporters, which query it
from .graph.graph_store import GraphStore
from .graph.spatial_graph import SpatialGraph, AnalysisReport

from .export.path_table import write_path_table
from .loaders.record_loader import RecordLoader
from .report.console_report import format_report, print_report

__version__ = "1.0.0"

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    'Vertex',
    'Edge',
    'EdgeStatus',
    'IdMapping',
    'PathResult',
    'SpatialGraphError',
    'EmptyInputError',
    'DuplicateVertexError',
    'InvalidVertexError',
    'NoPathError',
    'ResourceError',
    'RecordLoadError',
    'ConfigurationError',
    'AnalysisConfig',
    'GraphStore',
    'SpatialGraph',
    'AnalysisReport',
    'write_path_table',
    'RecordLoader',
    'format_report',
    'print_report',
]
