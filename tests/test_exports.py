"""
Path table and diagram exports.
"""

import graphviz
import pytest

from spatial_graph.core.exceptions import ResourceError
from spatial_graph.export.path_table import compute_path_rows, format_row, write_path_table
from spatial_graph.graph.graph_visualizer import GraphVisualizer
from spatial_graph.graph.shortest_path import mark_path_edges, shortest_path
from tests.conftest import make_store


class TestPathTable:

    def test_format_found_row(self, line_store):
        row = format_row(shortest_path(line_store, 1, 3))
        assert row == ["1", "3", "7.00", "1->2->3"]

    def test_format_failed_row(self, isolated_store):
        assert format_row(shortest_path(isolated_store, 1, 4)) == ["1", "4", "-1.00", "No path"]
        assert format_row(shortest_path(isolated_store, 1, 50)) == ["1", "50", "-1.00", "No path"]

    def test_compute_rows_in_input_order(self, triangle_store):
        results = compute_path_rows(triangle_store, [(3, 1), (1, 2)])
        assert [(r.source, r.target) for r in results] == [(3, 1), (1, 2)]

    def test_write_table(self, tmp_path, isolated_store):
        path = tmp_path / "paths.csv"
        results = write_path_table(isolated_store, [(1, 3), (1, 4), (2, 2)], str(path))
        assert len(results) == 3
        assert path.read_text(encoding="utf-8").splitlines() == [
            "SourceNodeID;TargetNodeID;PathLength;Path",
            "1;3;7.00;1->2->3",
            "1;4;-1.00;No path",
            "2;2;0.00;2",
        ]

    def test_unwritable_destination(self, tmp_path, line_store):
        with pytest.raises(ResourceError) as exc_info:
            write_path_table(line_store, [(1, 2)], str(tmp_path / "missing" / "paths.csv"))
        assert exc_info.value.path.endswith("paths.csv")


class TestGraphVisualizer:

    def test_dot_labels_and_weights(self, line_store):
        source = GraphVisualizer().to_source(line_store).replace('"', '')
        assert source.startswith("graph G {")
        assert "label=1" in source
        assert "label=3.00" in source
        assert "label=4.00" in source
        assert "color=red" not in source

    def test_path_edges_highlighted(self, triangle_store):
        mark_path_edges(triangle_store, [1, 3])
        dot = GraphVisualizer().build_dot(triangle_store)
        highlighted = [line for line in dot.body if "color=red" in line]
        assert len(highlighted) == 1
        assert "0 -- 2" in highlighted[0]
        assert "penwidth=2" in highlighted[0]

    def test_custom_style(self, triangle_store):
        mark_path_edges(triangle_store, [1, 2])
        source = GraphVisualizer(path_color="blue", path_penwidth=3).to_source(triangle_store)
        assert "color=blue" in source
        assert "penwidth=3" in source

    def test_writes_dot_file(self, tmp_path, line_store):
        path = tmp_path / "graph.dot"
        written = GraphVisualizer().draw_graph(line_store, str(path))
        assert written == str(path)
        assert path.read_text(encoding="utf-8").startswith("graph G {")

    def test_dot_file_under_a_regular_file(self, blocked_dir, line_store):
        """The parent directory cannot be created when a file already holds its name."""
        with pytest.raises(ResourceError) as exc_info:
            GraphVisualizer().draw_graph(line_store, str(blocked_dir / "graph.dot"))
        assert exc_info.value.details["path"].endswith("graph.dot")

    def test_png_falls_back_to_matplotlib(self, tmp_path, line_store, monkeypatch):
        def no_graphviz(self, filename=None, **kwargs):
            # render() writes the source file before it looks for the executable
            self.save(filename=filename)
            raise graphviz.ExecutableNotFound(("dot",))

        monkeypatch.setattr(graphviz.Graph, "render", no_graphviz)
        path = tmp_path / "graph.png"
        GraphVisualizer().draw_graph(line_store, str(path))
        assert path.read_bytes().startswith(b"\x89PNG")
        assert not (tmp_path / "graph.gv").exists()

    def test_matplotlib_drawing(self, tmp_path, triangle_store):
        mark_path_edges(triangle_store, [1, 3])
        path = tmp_path / "graph.png"
        GraphVisualizer(figure_size=(4, 3)).draw_graph_matplotlib(triangle_store, str(path))
        assert path.stat().st_size > 0

    def test_positional_labels(self):
        store = make_store({10: (0, 0, 0), 20: (1, 0, 0)}, [(1, 2)], id_mapping="positional")
        source = GraphVisualizer().to_source(store).replace('"', '')
        assert "label=1" in source
        assert "label=10" not in source

    def test_failed_rendering_raises_resource_error(self, tmp_path, line_store, monkeypatch):
        def dot_fails(self, filename=None, **kwargs):
            self.save(filename=filename)
            raise graphviz.CalledProcessError(3, ["dot", "-Tpng"])

        monkeypatch.setattr(graphviz.Graph, "render", dot_fails)
        path = tmp_path / "graph.png"
        with pytest.raises(ResourceError) as exc_info:
            GraphVisualizer().draw_graph(line_store, str(path))
        assert exc_info.value.details == {"returncode": 3, "path": str(path)}
        assert not (tmp_path / "graph.gv").exists()


class TestResourceError:

    def test_details_and_path_are_combined(self):
        error = ResourceError("Cannot write", path="out.csv", details={"pairs": 10})
        assert error.details == {"pairs": 10, "path": "out.csv"}
        assert str(error) == "Cannot write (pairs=10, path=out.csv)"

    def test_caller_details_not_mutated(self):
        details = {"pairs": 10}
        ResourceError("Cannot write", path="out.csv", details=details)
        assert details == {"pairs": 10}
