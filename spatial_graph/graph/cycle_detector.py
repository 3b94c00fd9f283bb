"""
Cycle detection by depth-first traversal.

Each vertex is in one of three states while the traversal runs: not yet
seen, on the current DFS stack, or finished. An edge from the current
vertex to a vertex still on the stack, other than the edge back to the
current vertex's DFS parent, is a back edge and closes a cycle.

The traversal is iterative (an explicit stack of neighbour iterators), so
long chains do not run into the interpreter's recursion limit.
"""

import logging
from dataclasses import dataclass, field
from enum import Enum
from typing import Iterator, List, Optional, Tuple

from ..core.interfaces import GraphAnalyzer
from ..core.models import Edge

logger = logging.getLogger(__name__)


class VisitState(Enum):
    UNVISITED = 0
    IN_PROGRESS = 1
    DONE = 2


@dataclass
class DfsTrace:
    """Everything one full depth-first traversal observed."""
    states: List[VisitState] = field(default_factory=list)
    discovery_order: List[int] = field(default_factory=list)
    parents: List[Optional[int]] = field(default_factory=list)
    back_edges: List[Tuple[int, int]] = field(default_factory=list)
    roots: List[int] = field(default_factory=list)

    @property
    def has_cycle(self) -> bool:
        return bool(self.back_edges)

    @property
    def tree_edge_count(self) -> int:
        return sum(1 for p in self.parents if p is not None)


def depth_first_traversal(store) -> DfsTrace:
    """
    Run a depth-first traversal over the whole store.

    Roots and neighbours are taken in ascending index order, so the trace
    is deterministic for a given store.

    Returns:
        DfsTrace with final states, discovery order, parent links,
        back edges as (descendant, ancestor) index pairs, and the roots
        the traversal restarted from
    """
    vertex_count = store.vertex_count()
    trace = DfsTrace(
        states=[VisitState.UNVISITED] * vertex_count,
        parents=[None] * vertex_count,
    )
    states = trace.states

    for root in range(vertex_count):
        if states[root] is not VisitState.UNVISITED:
            continue

        trace.roots.append(root)
        states[root] = VisitState.IN_PROGRESS
        trace.discovery_order.append(root)
        stack: List[Tuple[int, Iterator[Tuple[int, Edge]]]] = [(root, iter(store.neighbors(root)))]

        while stack:
            current, pending = stack[-1]
            for neighbor, _edge in pending:
                state = states[neighbor]
                if state is VisitState.UNVISITED:
                    states[neighbor] = VisitState.IN_PROGRESS
                    trace.parents[neighbor] = current
                    trace.discovery_order.append(neighbor)
                    stack.append((neighbor, iter(store.neighbors(neighbor))))
                    break
                if state is VisitState.IN_PROGRESS and neighbor != trace.parents[current]:
                    trace.back_edges.append((current, neighbor))
            else:
                states[current] = VisitState.DONE
                stack.pop()

    return trace


class CycleDetector(GraphAnalyzer):
    """Reports whether a graph store contains at least one cycle."""

    def analyze(self, store) -> DfsTrace:
        trace = depth_first_traversal(store)
        if trace.has_cycle:
            u, v = trace.back_edges[0]
            logger.debug("Cycle detected: back edge %d -- %d",
                         store.external_id(u), store.external_id(v))
        return trace


def has_cycle(store) -> bool:
    return depth_first_traversal(store).has_cycle
