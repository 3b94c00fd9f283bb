"""
Graph builder module for constructing graph stores.
"""

import logging
from typing import Iterable, Optional, Sequence, Tuple

from ..config.analysis_config import AnalysisConfig
from ..core.interfaces import GraphBuilder as IGraphBuilder
from ..core.models import EdgeStatus, Vertex
from ..loaders.record_loader import RecordLoader
from ..validators.validation_result import BUILDER, ValidationResult
from .graph_store import GraphStore

logger = logging.getLogger(__name__)

_SKIP_REASONS = {
    EdgeStatus.OUT_OF_RANGE: "unknown vertex id",
    EdgeStatus.SELF_LOOP: "self-loop",
    EdgeStatus.DUPLICATE: "duplicate edge",
}


class GraphBuilder(IGraphBuilder):
    """
    Builds graph stores from vertex and edge records.

    Edges that cannot be inserted are skipped; each one is logged and
    recorded in :attr:`diagnostics`.
    """

    def __init__(self, config=None, diagnostics: Optional[ValidationResult] = None):
        self.config = config or AnalysisConfig()
        self.diagnostics = diagnostics if diagnostics is not None else ValidationResult()

    def build_store(self, vertices: Sequence[Vertex]) -> GraphStore:
        """
        Create the store from vertex records.

        Raises:
            EmptyInputError: if ``vertices`` is empty
            DuplicateVertexError: on repeated ids with explicit id mapping
        """
        return GraphStore.build(vertices, id_mapping=self.config.id_mapping)

    def add_edges(self, store: GraphStore, edges: Iterable[Tuple[int, int]]) -> GraphStore:
        """
        Add edge records to the store, skipping the ones it rejects.

        Args:
            store: GraphStore to fill
            edges: (source_id, target_id) pairs of external ids

        Returns:
            The same store
        """
        added = 0
        for source_id, target_id in edges:
            status = store.add_edge(source_id, target_id)
            if status is EdgeStatus.ADDED:
                added += 1
                continue

            message = f"Edge {source_id} -- {target_id} skipped: {_SKIP_REASONS[status]}"
            if status is EdgeStatus.OUT_OF_RANGE:
                logger.warning(message)
                self.diagnostics.add_warning(message, BUILDER)
            else:
                logger.info(message)
                self.diagnostics.add_info(message, BUILDER)

        self.diagnostics.details['edges_added'] = added
        logger.info("Graph built: %d vertices, %d edges", store.vertex_count(), store.edge_count())
        return store

    def build_from_records(
        self,
        vertices: Sequence[Vertex],
        edges: Iterable[Tuple[int, int]],
    ) -> GraphStore:
        store = self.build_store(vertices)
        return self.add_edges(store, edges)

    def build_from_files(self, nodes_path: str, edges_path: str) -> GraphStore:
        """
        Load both record files and build the store.

        Raises:
            RecordLoadError: if either file cannot be read
            EmptyInputError: if the node file holds no valid record
        """
        loader = RecordLoader.from_config(self.config, diagnostics=self.diagnostics)
        vertices = loader.load_nodes(nodes_path)
        store = self.build_store(vertices)
        return self.add_edges(store, loader.load_edges(edges_path))
