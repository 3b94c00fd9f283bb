"""
Command-line interface tests.
"""

import argparse
import io
import json

import pytest
from rich.console import Console

from spatial_graph.cli import EXIT_FATAL, EXIT_OK, EXIT_OUTPUT_FAILED, main, parse_pairs


def quiet_console():
    return Console(file=io.StringIO(), width=100, color_system=None)


class TestParsePairs:

    def test_pairs(self):
        assert parse_pairs("1:5, 1:10,") == [(1, 5), (1, 10)]

    @pytest.mark.parametrize("value", ["1-5", "a:b", ""])
    def test_bad_pairs(self, value):
        with pytest.raises(argparse.ArgumentTypeError):
            parse_pairs(value)


class TestMain:

    def test_full_run(self, nodes_file, edges_file, tmp_path):
        console = quiet_console()
        code = main([
            str(nodes_file), str(edges_file),
            "--source", "1", "--target", "3",
            "--diagram", str(tmp_path / "graph.dot"),
            "--paths-csv", str(tmp_path / "paths.csv"),
            "--pairs", "1:3,1:4",
            "--log-level", "WARNING",
        ], console=console)
        assert code == EXIT_OK
        assert "length = 7.00" in console.file.getvalue()
        rows = (tmp_path / "paths.csv").read_text(encoding="utf-8").splitlines()
        assert rows[1:] == ["1;3;7.00;1->2->3", "1;4;-1.00;No path"]

    def test_missing_nodes_file(self, edges_file, tmp_path):
        assert main([str(tmp_path / "none.csv"), str(edges_file)], console=quiet_console()) == EXIT_FATAL

    def test_duplicate_ids(self, edges_file, tmp_path):
        nodes = tmp_path / "dup.csv"
        nodes.write_text("id;x;y;z\n1;0;0;0\n1;1;1;1\n", encoding="utf-8")
        assert main([str(nodes), str(edges_file)], console=quiet_console()) == EXIT_FATAL

    def test_bad_config(self, nodes_file, edges_file, tmp_path):
        config = tmp_path / "config.json"
        config.write_text(json.dumps({"id_mapping": "sideways"}), encoding="utf-8")
        code = main([str(nodes_file), str(edges_file), "--config", str(config)], console=quiet_console())
        assert code == EXIT_FATAL

    def test_output_failure_exit_code(self, nodes_file, edges_file, tmp_path, blocked_dir):
        code = main([
            str(nodes_file), str(edges_file),
            "--source", "1", "--target", "2",
            "--diagram", str(blocked_dir / "graph.dot"),
            "--paths-csv", str(tmp_path / "paths.csv"),
        ], console=quiet_console())
        assert code == EXIT_OUTPUT_FAILED

    def test_no_prompt_without_terminal(self, nodes_file, edges_file, tmp_path, monkeypatch):
        monkeypatch.setattr("sys.stdin", io.StringIO(""))
        console = quiet_console()
        code = main([
            str(nodes_file), str(edges_file),
            "--diagram", str(tmp_path / "graph.dot"),
            "--paths-csv", str(tmp_path / "paths.csv"),
        ], console=console)
        assert code == EXIT_OK
        assert "Shortest path" not in console.file.getvalue()

    def test_config_file_and_log_file(self, nodes_file, edges_file, tmp_path):
        config = tmp_path / "config.json"
        config.write_text(json.dumps({
            "diagram_path": str(tmp_path / "from_config.dot"),
            "paths_csv": str(tmp_path / "from_config.csv"),
            "node_pairs": [[2, 3]],
        }), encoding="utf-8")
        log_file = tmp_path / "run.log"
        code = main([
            str(nodes_file), str(edges_file),
            "--source", "1", "--target", "2",
            "--config", str(config),
            "--log-file", str(log_file),
        ], console=quiet_console())
        assert code == EXIT_OK
        assert (tmp_path / "from_config.dot").exists()
        assert (tmp_path / "from_config.csv").read_text(encoding="utf-8").splitlines()[1] == "2;3;4.00;2->3"
        assert "Path table written" in log_file.read_text(encoding="utf-8")
