"""
Graph Module - Graph Store Construction and Analysis

Contains the graph store and the analysis components working on it:
degree, connectivity, cycle detection and shortest paths.
"""

from .graph_store import GraphStore
from .graph_builder import GraphBuilder
from .degree_analyzer import DegreeAnalyzer, DegreeResult, compute_degrees
from .connectivity_analyzer import ConnectivityAnalyzer, ConnectivityResult, is_connected
from .cycle_detector import CycleDetector, DfsTrace, VisitState, depth_first_traversal, has_cycle
from .shortest_path import ShortestPathEngine, dijkstra, shortest_path, mark_path_edges
from .graph_visualizer import GraphVisualizer
from .spatial_graph import SpatialGraph, AnalysisReport

__all__ = [
    'GraphStore',
    'GraphBuilder',
    'DegreeAnalyzer',
    'DegreeResult',
    'compute_degrees',
    'ConnectivityAnalyzer',
    'ConnectivityResult',
    'is_connected',
    'CycleDetector',
    'DfsTrace',
    'VisitState',
    'depth_first_traversal',
    'has_cycle',
    'ShortestPathEngine',
    'dijkstra',
    'shortest_path',
    'mark_path_edges',
    'GraphVisualizer',
    'SpatialGraph',
    'AnalysisReport',
]
