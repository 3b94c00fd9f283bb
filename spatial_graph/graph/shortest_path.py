"""
Shortest path engine (Dijkstra) and path marking for illustration.
"""

import heapq
import logging
import math
from typing import Dict, List, Optional, Sequence, Tuple

from ..core.exceptions import InvalidVertexError, NoPathError
from ..core.models import PathResult

logger = logging.getLogger(__name__)

INFINITY = math.inf


def dijkstra(store, source: int) -> Tuple[List[float], List[Optional[int]]]:
    """
    Single-source shortest distances from internal index ``source``.

    Edge weights are Euclidean distances and therefore never negative.
    Stale heap entries (a vertex pushed again with a shorter distance) are
    skipped when popped; a settled vertex is never relaxed again.

    Returns:
        (distances, predecessors) indexed by internal index. Unreached
        vertices have distance ``inf`` and predecessor None.
    """
    vertex_count = store.vertex_count()
    distances = [INFINITY] * vertex_count
    predecessors: List[Optional[int]] = [None] * vertex_count
    settled = [False] * vertex_count

    distances[source] = 0.0
    queue: List[Tuple[float, int]] = [(0.0, source)]

    while queue:
        dist_u, u = heapq.heappop(queue)
        if settled[u]:
            continue
        settled[u] = True

        for v, edge in store.neighbors(u):
            if settled[v]:
                continue
            candidate = dist_u + edge.weight
            if candidate < distances[v]:
                distances[v] = candidate
                predecessors[v] = u
                heapq.heappush(queue, (candidate, v))

    return distances, predecessors


class ShortestPathEngine:
    """
    Answers shortest-path queries between external ids of one store.

    The Dijkstra tree of each source vertex is computed once and reused
    for later queries from the same source.
    """

    def __init__(self, store):
        self.store = store
        self._trees: Dict[int, Tuple[List[float], List[Optional[int]]]] = {}

    def tree(self, source: int) -> Tuple[List[float], List[Optional[int]]]:
        if source not in self._trees:
            self._trees[source] = dijkstra(self.store, source)
        return self._trees[source]

    def shortest_path(self, source_ext: int, target_ext: int) -> PathResult:
        """
        Shortest path between two external ids.

        Returns:
            PathResult with the distance and the path as external ids in
            source-to-target order. Invalid endpoints and disconnected
            pairs yield a failed result carrying the (-1, []) sentinel.
        """
        source = self.store.lookup(source_ext)
        target = self.store.lookup(target_ext)
        if source is None or target is None:
            bad_id = source_ext if source is None else target_ext
            logger.warning("Invalid vertex id %s in path query %s -> %s",
                           bad_id, source_ext, target_ext)
            return PathResult.failure(
                source_ext, target_ext,
                InvalidVertexError(bad_id, self.store.vertex_count()),
            )

        distances, predecessors = self.tree(source)

        if predecessors[target] is None and target != source:
            logger.info("No path between %s and %s", source_ext, target_ext)
            return PathResult.failure(source_ext, target_ext, NoPathError(source_ext, target_ext))

        path = []
        current = target
        while True:
            path.append(self.store.external_id(current))
            if current == source:
                break
            current = predecessors[current]
        path.reverse()

        return PathResult(
            source=source_ext,
            target=target_ext,
            distance=distances[target],
            path=tuple(path),
        )

    def clear_cache(self) -> None:
        self._trees.clear()


def shortest_path(store, source_ext: int, target_ext: int) -> PathResult:
    return ShortestPathEngine(store).shortest_path(source_ext, target_ext)


def mark_path_edges(store, path: Sequence[int]) -> int:
    """
    Flag the edges along ``path`` (external ids) for illustration.

    Every edge's ``in_path`` flag is reset first, so only the edges of this
    path end up flagged. Consecutive ids without an edge between them are
    skipped.

    Returns:
        Number of edges flagged
    """
    for edge in store.edges():
        edge.in_path = False

    marked = 0
    for u_ext, v_ext in zip(path, path[1:]):
        u = store.lookup(u_ext)
        v = store.lookup(v_ext)
        edge = store.edge_between(u, v) if u is not None and v is not None else None
        if edge is None:
            logger.debug("No edge between %s and %s, not marked", u_ext, v_ext)
            continue
        edge.in_path = True
        marked += 1

    return marked
