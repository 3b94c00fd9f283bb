"""
SpatialGraph: one analysis run over a weighted undirected graph.

The class owns the graph store for the lifetime of the run and delegates
each concern to a specialized component: the builder fills the store, the
analyzers read it, the visualizer and the path table export it.
"""

import logging
import time
from dataclasses import dataclass
from typing import Any, Dict, Iterable, List, Optional, Sequence, Tuple

from ..config.analysis_config import AnalysisConfig
from ..core.exceptions import RecordLoadError, ResourceError
from ..core.models import PathResult, Vertex
from ..export.path_table import write_path_table
from ..loaders.record_loader import RecordLoader
from ..report.console_report import format_report, print_report
from ..validators.validation_result import EXPORT, LOADER, PATH_QUERY, ValidationResult
from .connectivity_analyzer import ConnectivityAnalyzer, ConnectivityResult
from .cycle_detector import CycleDetector, DfsTrace
from .degree_analyzer import DegreeAnalyzer, DegreeResult
from .graph_builder import GraphBuilder
from .graph_visualizer import GraphVisualizer
from .shortest_path import ShortestPathEngine, mark_path_edges

logger = logging.getLogger(__name__)


@dataclass
class AnalysisReport:
    """Structural properties of one graph, as handed to the exporters."""
    vertex_count: int
    edge_count: int
    degrees: DegreeResult
    connectivity: ConnectivityResult
    cycles: DfsTrace
    path: Optional[PathResult] = None
    elapsed_ms: float = 0.0

    @property
    def max_degree(self) -> int:
        return self.degrees.max_degree

    @property
    def is_connected(self) -> bool:
        return self.connectivity.is_connected

    @property
    def has_cycle(self) -> bool:
        return self.cycles.has_cycle

    def to_dict(self) -> Dict[str, Any]:
        data: Dict[str, Any] = {
            'vertex_count': self.vertex_count,
            'edge_count': self.edge_count,
            'degrees': self.degrees.by_external_id(),
            'max_degree': self.max_degree,
            'is_connected': self.is_connected,
            'component_count': self.connectivity.component_count,
            'has_cycle': self.has_cycle,
            'elapsed_ms': self.elapsed_ms,
        }
        if self.path is not None:
            distance, path = self.path.to_tuple()
            data['shortest_path'] = {
                'source': self.path.source,
                'target': self.path.target,
                'distance': distance,
                'path': path,
            }
        return data


class SpatialGraph:
    """
    Builds a graph store from records and runs every analysis over it.

    Structural failures while building (no vertices, duplicate ids) raise;
    skipped edges, failed path queries and unwritable outputs are collected
    in :attr:`diagnostics` instead.
    """

    def __init__(
        self,
        vertices: Sequence[Vertex],
        edges: Iterable[Tuple[int, int]],
        config: Optional[AnalysisConfig] = None,
        diagnostics: Optional[ValidationResult] = None,
    ):
        self.config = config or AnalysisConfig()
        self.diagnostics = diagnostics if diagnostics is not None else ValidationResult()

        # Specialized components
        self._graph_builder = GraphBuilder(self.config, self.diagnostics)
        self._degree_analyzer = DegreeAnalyzer()
        self._connectivity_analyzer = ConnectivityAnalyzer()
        self._cycle_detector = CycleDetector()
        self._graph_visualizer = GraphVisualizer.from_config(self.config)

        self.store = self._graph_builder.build_from_records(vertices, edges)
        self.path_engine = ShortestPathEngine(self.store)

    @classmethod
    def from_files(
        cls,
        nodes_path: str,
        edges_path: str,
        config: Optional[AnalysisConfig] = None,
    ) -> 'SpatialGraph':
        """
        Load record files and build the graph.

        An unreadable node file is fatal. An unreadable edge file is
        reported and the graph is built without edges.
        """
        config = config or AnalysisConfig()
        diagnostics = ValidationResult()
        loader = RecordLoader.from_config(config, diagnostics=diagnostics)

        vertices = loader.load_nodes(nodes_path)
        try:
            edges = loader.load_edges(edges_path)
        except RecordLoadError as e:
            logger.error("Edge records unavailable, continuing without edges: %s", e)
            diagnostics.add_error(str(e), LOADER)
            edges = []

        return cls(vertices, edges, config=config, diagnostics=diagnostics)

    # ------------------------------------------------------------------
    # Analyses
    # ------------------------------------------------------------------

    def analyze_degrees(self) -> DegreeResult:
        return self._degree_analyzer.analyze(self.store)

    def analyze_connectivity(self) -> ConnectivityResult:
        return self._connectivity_analyzer.analyze(self.store)

    def detect_cycles(self) -> DfsTrace:
        return self._cycle_detector.analyze(self.store)

    def shortest_path(self, source: int, target: int) -> PathResult:
        result = self.path_engine.shortest_path(source, target)
        if result.error is not None:
            self.diagnostics.add_info(f"Path {source} -> {target}: {result.error}", PATH_QUERY)
        return result

    def mark_path(self, path: Sequence[int]) -> int:
        return mark_path_edges(self.store, path)

    def analyze(self, source: Optional[int] = None, target: Optional[int] = None) -> AnalysisReport:
        """
        Run every analyzer, plus the shortest path when both ends are given.

        A found path is marked on the store's edges for the diagram.
        """
        started = time.perf_counter()

        report = AnalysisReport(
            vertex_count=self.store.vertex_count(),
            edge_count=self.store.edge_count(),
            degrees=self.analyze_degrees(),
            connectivity=self.analyze_connectivity(),
            cycles=self.detect_cycles(),
        )

        if source is not None and target is not None:
            report.path = self.shortest_path(source, target)
            if report.path.found:
                self.mark_path(report.path.path)

        report.elapsed_ms = (time.perf_counter() - started) * 1000.0
        logger.info("Analysis finished in %.2f ms", report.elapsed_ms)
        return report

    # ------------------------------------------------------------------
    # Reporting and export
    # ------------------------------------------------------------------

    def get_report(self, report: AnalysisReport) -> str:
        return format_report(report, self.diagnostics, decimals=self.config.decimals)

    def print_report(self, report: AnalysisReport, console=None) -> None:
        print_report(report, self.diagnostics, console=console, decimals=self.config.decimals)

    def draw_graph(self, filepath: Optional[str] = None) -> str:
        """Write the diagram; raises ResourceError if it cannot be created."""
        return self._graph_visualizer.draw_graph(self.store, filepath or self.config.diagram_path)

    def write_paths(
        self,
        filepath: Optional[str] = None,
        node_pairs: Optional[Sequence[Tuple[int, int]]] = None,
    ) -> List[PathResult]:
        """Write the path table; raises ResourceError if it cannot be created."""
        return write_path_table(
            self.store,
            node_pairs if node_pairs is not None else self.config.node_pairs,
            filepath or self.config.paths_csv,
            delimiter=self.config.delimiter,
            decimals=self.config.decimals,
            engine=self.path_engine,
        )

    def export(
        self,
        diagram_path: Optional[str] = None,
        paths_csv: Optional[str] = None,
        node_pairs: Optional[Sequence[Tuple[int, int]]] = None,
    ) -> List[ResourceError]:
        """
        Write the diagram and the path table.

        A failing output does not stop the other one.

        Returns:
            The ResourceErrors raised by the outputs that failed
        """
        failures: List[ResourceError] = []

        for write in (
            lambda: self.draw_graph(diagram_path),
            lambda: self.write_paths(paths_csv, node_pairs),
        ):
            try:
                write()
            except ResourceError as e:
                logger.error("Output failed: %s", e)
                self.diagnostics.add_error(str(e), EXPORT)
                failures.append(e)

        return failures
