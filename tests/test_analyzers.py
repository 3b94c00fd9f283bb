"""
Degree, connectivity and cycle analysis on hand-checked graphs.
"""

from spatial_graph.graph.connectivity_analyzer import ConnectivityAnalyzer, is_connected
from spatial_graph.graph.cycle_detector import (
    CycleDetector,
    VisitState,
    depth_first_traversal,
    has_cycle,
)
from spatial_graph.graph.degree_analyzer import DegreeAnalyzer, compute_degrees
from tests.conftest import make_store


class TestDegreeAnalyzer:

    def test_line_degrees(self, line_store):
        result = DegreeAnalyzer().analyze(line_store)
        assert result.per_vertex == {0: 1, 1: 2, 2: 1}
        assert result.by_external_id() == {1: 1, 2: 2, 3: 1}
        assert result.max_degree == 2

    def test_total_degree_is_twice_edge_count(self, triangle_store):
        result = compute_degrees(triangle_store)
        assert result.total_degree == 2 * triangle_store.edge_count()
        assert result.max_degree == 2

    def test_isolated_vertex_has_degree_zero(self, isolated_store):
        assert compute_degrees(isolated_store).by_external_id()[4] == 0

    def test_single_vertex_graph(self):
        store = make_store({1: (0, 0, 0)}, [])
        result = compute_degrees(store)
        assert result.max_degree == 0
        assert result.per_vertex == {0: 0}


class TestConnectivityAnalyzer:

    def test_line_is_connected(self, line_store):
        result = ConnectivityAnalyzer().analyze(line_store)
        assert result.is_connected
        assert result.component_count == 1
        assert result.connected_components == [[1, 2, 3]]
        assert result.isolated_nodes == []

    def test_isolated_vertex_splits_graph(self, isolated_store):
        result = ConnectivityAnalyzer().analyze(isolated_store)
        assert not result.is_connected
        assert result.component_count == 2
        assert result.connected_components == [[1, 2, 3], [4]]
        assert result.isolated_nodes == [4]
        assert result.same_component(0, 2)
        assert not result.same_component(0, 3)

    def test_analysis_details(self, isolated_store):
        details = ConnectivityAnalyzer().analyze(isolated_store).analysis_details
        assert details['total_nodes'] == 4
        assert details['total_edges'] == 2
        assert details['largest_component'] == 3

    def test_single_vertex_is_connected(self):
        assert is_connected(make_store({5: (1, 1, 1)}, []))

    def test_edgeless_graph_has_one_component_per_vertex(self):
        store = make_store({1: (0, 0, 0), 2: (1, 0, 0), 3: (2, 0, 0)}, [])
        assert ConnectivityAnalyzer().analyze(store).component_count == 3


class TestCycleDetector:

    def test_line_is_acyclic(self, line_store):
        trace = CycleDetector().analyze(line_store)
        assert not trace.has_cycle
        assert trace.back_edges == []
        assert trace.tree_edge_count == 2

    def test_triangle_has_cycle(self, triangle_store):
        trace = depth_first_traversal(triangle_store)
        assert trace.has_cycle
        assert trace.back_edges == [(2, 0)]

    def test_parent_edge_is_not_a_cycle(self):
        """A single edge is walked back to the parent, which is not a back edge."""
        store = make_store({1: (0, 0, 0), 2: (1, 0, 0)}, [(1, 2)])
        assert not has_cycle(store)

    def test_cycle_in_second_component(self):
        coords = {i: (float(i), 0.0, 0.0) for i in range(1, 6)}
        store = make_store(coords, [(1, 2), (3, 4), (4, 5), (5, 3)])
        trace = depth_first_traversal(store)
        assert trace.has_cycle
        assert trace.roots == [0, 2]

    def test_traversal_visits_every_vertex(self, isolated_store):
        trace = depth_first_traversal(isolated_store)
        assert sorted(trace.discovery_order) == [0, 1, 2, 3]
        assert all(state is VisitState.DONE for state in trace.states)
        assert trace.parents == [None, 0, 1, None]

    def test_long_chain_does_not_recurse(self):
        coords = {i: (float(i), 0.0, 0.0) for i in range(1, 5001)}
        edges = [(i, i + 1) for i in range(1, 5000)]
        store = make_store(coords, edges)
        assert not has_cycle(store)
        store.add_edge(1, 5000)
        assert has_cycle(store)
