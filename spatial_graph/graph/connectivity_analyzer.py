"""
Connectivity analyzer for spatial graphs.
"""

import logging
from collections import deque
from typing import Any, Dict, List

from ..core.interfaces import GraphAnalyzer

logger = logging.getLogger(__name__)


class ConnectivityResult:
    """Results from connectivity analysis."""

    def __init__(self):
        self.component_count = 0
        self.labels: List[int] = []
        self.connected_components: List[List[int]] = []
        self.isolated_nodes: List[int] = []
        self.analysis_details: Dict[str, Any] = {}

    @property
    def is_connected(self) -> bool:
        return self.component_count == 1

    def same_component(self, u: int, v: int) -> bool:
        """True if internal indices ``u`` and ``v`` share a component."""
        return self.labels[u] == self.labels[v]

    def __repr__(self) -> str:
        return f"ConnectivityResult(components={self.component_count}, isolated={len(self.isolated_nodes)})"


class ConnectivityAnalyzer(GraphAnalyzer):
    """
    Partitions the vertices of a graph store into connected components.

    A breadth-first traversal is started from each unvisited vertex in
    ascending index order; every vertex it reaches gets the same label.
    Components are reported as lists of external ids.
    """

    def analyze(self, store) -> ConnectivityResult:
        """
        Analyze connectivity of the given store.

        Args:
            store: GraphStore to analyze

        Returns:
            ConnectivityResult with component labels and membership
        """
        result = ConnectivityResult()
        vertex_count = store.vertex_count()
        labels = [-1] * vertex_count

        for start in range(vertex_count):
            if labels[start] != -1:
                continue

            label = result.component_count
            labels[start] = label
            members = [start]
            queue = deque([start])

            while queue:
                current = queue.popleft()
                for neighbor, _edge in store.neighbors(current):
                    if labels[neighbor] == -1:
                        labels[neighbor] = label
                        members.append(neighbor)
                        queue.append(neighbor)

            result.connected_components.append(sorted(store.external_id(i) for i in members))
            result.component_count += 1

        result.labels = labels
        result.isolated_nodes = [
            store.external_id(i) for i in range(vertex_count) if store.degree(i) == 0
        ]
        result.analysis_details = {
            'total_nodes': vertex_count,
            'total_edges': store.edge_count(),
            'component_count': result.component_count,
            'isolated_count': len(result.isolated_nodes),
            'largest_component': max((len(c) for c in result.connected_components), default=0),
        }

        logger.debug("Connectivity analysis: %d component(s)", result.component_count)
        return result


def is_connected(store) -> bool:
    return ConnectivityAnalyzer().analyze(store).is_connected
