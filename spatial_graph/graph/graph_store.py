"""
Graph store holding vertices and undirected weighted edges.

The store wraps a ``networkx.Graph`` whose node keys are internal indices
(load order of the vertex records). Each node carries its ``Vertex`` record
under the ``vertex`` attribute; each edge carries its Euclidean ``weight``
and the ``Edge`` object shared with callers under ``edge``.
"""

import logging
from typing import Dict, Iterable, List, Optional, Sequence, Tuple, Union

import networkx as nx

from ..core.exceptions import DuplicateVertexError, EmptyInputError, InvalidVertexError
from ..core.models import Edge, EdgeStatus, IdMapping, Vertex
from .constants import EDGE_ATTR, VERTEX_ATTR, WEIGHT_ATTR

logger = logging.getLogger(__name__)


class GraphStore:
    """
    In-memory store for one analysis run.

    Vertices are immutable once the store is built. Edges are immutable
    except for their ``in_path`` flag, which only ``mark_path_edges`` writes.
    """

    def __init__(self, vertices: Sequence[Vertex], id_mapping: Union[IdMapping, str] = IdMapping.EXPLICIT):
        if not vertices:
            raise EmptyInputError("No vertices loaded")

        self.id_mapping = IdMapping(id_mapping)
        self._vertices: List[Vertex] = list(vertices)
        self._index_by_id: Dict[int, int] = {}
        self.graph: nx.Graph = nx.Graph(name="Spatial Graph")

        for index, vertex in enumerate(self._vertices):
            if self.id_mapping is IdMapping.EXPLICIT:
                if vertex.external_id in self._index_by_id:
                    raise DuplicateVertexError(
                        vertex.external_id, self._index_by_id[vertex.external_id], index
                    )
                self._index_by_id[vertex.external_id] = index
            self.graph.add_node(index, **{VERTEX_ATTR: vertex})

        logger.debug("Graph store created with %d vertices (%s ids)",
                     len(self._vertices), self.id_mapping.value)

    @classmethod
    def build(cls, vertices: Sequence[Vertex], id_mapping: Union[IdMapping, str] = IdMapping.EXPLICIT) -> 'GraphStore':
        """Allocate a store sized to ``vertices``; raises EmptyInputError if empty."""
        return cls(vertices, id_mapping=id_mapping)

    # ------------------------------------------------------------------
    # Id translation
    # ------------------------------------------------------------------

    def lookup(self, external_id: int) -> Optional[int]:
        """Internal index for ``external_id``, or None when it maps to no vertex."""
        if self.id_mapping is IdMapping.POSITIONAL:
            index = external_id - 1
            return index if 0 <= index < len(self._vertices) else None
        return self._index_by_id.get(external_id)

    def index_of(self, external_id: int) -> int:
        index = self.lookup(external_id)
        if index is None:
            raise InvalidVertexError(external_id, len(self._vertices))
        return index

    def external_id(self, index: int) -> int:
        """
        Id under which ``index`` is reported and accepted by :meth:`lookup`.

        With positional mapping that is the position (``index + 1``), not
        the id field of the record, so reported paths can be queried and
        marked again.
        """
        if self.id_mapping is IdMapping.POSITIONAL:
            return index + 1
        return self._vertices[index].external_id

    # ------------------------------------------------------------------
    # Construction
    # ------------------------------------------------------------------

    def add_edge(self, u_ext: int, v_ext: int) -> EdgeStatus:
        """
        Add an undirected edge between two external ids.

        Out-of-range ids are a no-op. Self-loops are rejected, and so is a
        second edge for an already connected pair (the first edge is kept).

        Returns:
            EdgeStatus describing what happened
        """
        u = self.lookup(u_ext)
        v = self.lookup(v_ext)
        if u is None or v is None:
            return EdgeStatus.OUT_OF_RANGE
        if u == v:
            return EdgeStatus.SELF_LOOP
        if self.graph.has_edge(u, v):
            return EdgeStatus.DUPLICATE

        weight = self._vertices[u].distance_to(self._vertices[v])
        edge = Edge(u=min(u, v), v=max(u, v), weight=weight)
        self.graph.add_edge(u, v, **{WEIGHT_ATTR: weight, EDGE_ATTR: edge})
        return EdgeStatus.ADDED

    def add_edges(self, pairs: Iterable[Tuple[int, int]]) -> Dict[EdgeStatus, int]:
        """Add several edges, returning a count per status."""
        counts = {status: 0 for status in EdgeStatus}
        for u_ext, v_ext in pairs:
            counts[self.add_edge(u_ext, v_ext)] += 1
        return counts

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    def vertex_count(self) -> int:
        return self.graph.number_of_nodes()

    def edge_count(self) -> int:
        return self.graph.number_of_edges()

    def vertex(self, index: int) -> Vertex:
        return self._vertices[index]

    def vertices(self) -> List[Vertex]:
        return list(self._vertices)

    def degree(self, index: int) -> int:
        return self.graph.degree(index)

    def neighbors(self, index: int) -> List[Tuple[int, Edge]]:
        """Neighbours of ``index`` in ascending index order with their edges."""
        adjacency = self.graph.adj[index]
        return [(n, adjacency[n][EDGE_ATTR]) for n in sorted(adjacency)]

    def edge_between(self, u: int, v: int) -> Optional[Edge]:
        data = self.graph.get_edge_data(u, v)
        return data[EDGE_ATTR] if data else None

    def edges(self) -> List[Edge]:
        """All edges, ordered by (u, v) with u < v."""
        return sorted(
            (data[EDGE_ATTR] for _, _, data in self.graph.edges(data=True)),
            key=lambda e: (e.u, e.v),
        )

    def path_edges(self) -> List[Edge]:
        return [e for e in self.edges() if e.in_path]

    def __len__(self) -> int:
        return self.vertex_count()

    def __repr__(self) -> str:
        return f"GraphStore(vertices={self.vertex_count()}, edges={self.edge_count()}, ids={self.id_mapping.value})"
