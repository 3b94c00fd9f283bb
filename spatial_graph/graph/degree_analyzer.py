"""
Degree analyzer for spatial graphs.
"""

import logging
from dataclasses import dataclass, field
from typing import Dict

from ..core.interfaces import GraphAnalyzer

logger = logging.getLogger(__name__)


@dataclass
class DegreeResult:
    """Per-vertex degrees (keyed by internal index) and the graph degree."""
    per_vertex: Dict[int, int] = field(default_factory=dict)
    max_degree: int = 0
    external_ids: Dict[int, int] = field(default_factory=dict)

    def by_external_id(self) -> Dict[int, int]:
        """Degree table keyed by external id, in load order."""
        return {self.external_ids[i]: d for i, d in self.per_vertex.items()}

    @property
    def total_degree(self) -> int:
        return sum(self.per_vertex.values())


class DegreeAnalyzer(GraphAnalyzer):
    """
    Computes the degree of each vertex and the maximum degree of the graph.
    """

    def analyze(self, store) -> DegreeResult:
        result = DegreeResult()
        for index in range(store.vertex_count()):
            degree = store.degree(index)
            result.per_vertex[index] = degree
            result.external_ids[index] = store.external_id(index)
            if degree > result.max_degree:
                result.max_degree = degree

        logger.debug("Degree analysis: max degree %d over %d vertices",
                     result.max_degree, len(result.per_vertex))
        return result


def compute_degrees(store) -> DegreeResult:
    return DegreeAnalyzer().analyze(store)
