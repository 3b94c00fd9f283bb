"""
Record loader tests: header handling, malformed rows and unreadable files.
"""

import pytest

from spatial_graph.core.exceptions import RecordLoadError
from spatial_graph.loaders.record_loader import RecordLoader, load_edge_records, load_node_records
from spatial_graph.validators.validation_result import ValidationResult
from tests.conftest import write_lines


class TestLoadNodes:

    def test_loads_rows_in_file_order(self, nodes_file):
        vertices = load_node_records(str(nodes_file))
        assert [v.external_id for v in vertices] == [1, 2, 3, 4]
        assert vertices[2].coordinates == (3.0, 4.0, 0.0)

    def test_malformed_rows_are_skipped(self, tmp_path):
        path = write_lines(tmp_path / "nodes.csv", [
            "id;x;y;z",
            "1;0;0;0",
            "2;1;1",
            "",
            "x;1;2;3",
            "3; 1.5 ; 2.5 ; 3.5 ",
        ])
        diagnostics = ValidationResult()
        vertices = RecordLoader(diagnostics=diagnostics).load_nodes(str(path))
        assert [v.external_id for v in vertices] == [1, 3]
        assert vertices[1].coordinates == (1.5, 2.5, 3.5)
        assert len(diagnostics.warnings) == 2
        assert ":3:" in diagnostics.warnings[0]
        assert ":5:" in diagnostics.warnings[1]

    def test_without_header(self, tmp_path):
        path = write_lines(tmp_path / "nodes.txt", ["1,0,0,0", "2,1,0,0"])
        vertices = RecordLoader(delimiter=",", has_header=False).load_nodes(str(path))
        assert len(vertices) == 2

    def test_missing_file_raises(self, tmp_path):
        with pytest.raises(RecordLoadError) as exc_info:
            load_node_records(str(tmp_path / "absent.csv"))
        assert exc_info.value.path.endswith("absent.csv")


class TestLoadEdges:

    def test_loads_pairs(self, edges_file):
        assert load_edge_records(str(edges_file)) == [(1, 2), (2, 3)]

    def test_bad_rows_are_skipped(self, tmp_path):
        path = write_lines(tmp_path / "edges.csv", ["s;t", "1;2", "3", "a;b", "2;3"])
        loader = RecordLoader()
        assert loader.load_edges(str(path)) == [(1, 2), (2, 3)]
        assert len(loader.diagnostics.warnings) == 2

    def test_from_config(self, tmp_path):
        from spatial_graph.config.analysis_config import AnalysisConfig

        path = write_lines(tmp_path / "edges.tsv", ["1\t2"])
        loader = RecordLoader.from_config(AnalysisConfig(delimiter="\t", has_header=False))
        assert loader.load_edges(str(path)) == [(1, 2)]
