"""
Shared fixtures: small hand-checked graphs and record files on disk.
"""

import logging

import pytest

from spatial_graph.core.models import Vertex
from spatial_graph.graph.graph_store import GraphStore


def make_vertices(coords):
    """Vertices from an ``{external_id: (x, y, z)}`` mapping, in key order."""
    return [Vertex(external_id=i, x=x, y=y, z=z) for i, (x, y, z) in coords.items()]


def make_store(coords, edges, id_mapping="explicit"):
    store = GraphStore.build(make_vertices(coords), id_mapping=id_mapping)
    store.add_edges(edges)
    return store


LINE_COORDS = {1: (0.0, 0.0, 0.0), 2: (3.0, 0.0, 0.0), 3: (3.0, 4.0, 0.0)}
LINE_EDGES = [(1, 2), (2, 3)]


@pytest.fixture
def line_vertices():
    return make_vertices(LINE_COORDS)


@pytest.fixture
def line_store():
    """1 -- 2 -- 3 with weights 3 and 4."""
    return make_store(LINE_COORDS, LINE_EDGES)


@pytest.fixture
def triangle_store():
    """The line closed by the 5.0 edge 1 -- 3."""
    return make_store(LINE_COORDS, LINE_EDGES + [(1, 3)])


@pytest.fixture
def isolated_store():
    """The line plus a vertex 4 without edges."""
    coords = dict(LINE_COORDS)
    coords[4] = (10.0, 10.0, 10.0)
    return make_store(coords, LINE_EDGES)


def write_lines(path, lines):
    path.write_text("\n".join(lines) + "\n", encoding="utf-8")
    return path


@pytest.fixture
def nodes_file(tmp_path):
    return write_lines(tmp_path / "nodes.csv", [
        "id;x;y;z",
        "1;0;0;0",
        "2;3;0;0",
        "3;3;4;0",
        "4;10;10;10",
    ])


@pytest.fixture
def edges_file(tmp_path):
    return write_lines(tmp_path / "edges.csv", [
        "source;target",
        "1;2",
        "2;3",
    ])


@pytest.fixture(autouse=True)
def reset_package_logger():
    """Undo setup_logging() between tests so caplog keeps seeing records."""
    yield
    logger = logging.getLogger("spatial_graph")
    for handler in list(logger.handlers):
        if not isinstance(handler, logging.NullHandler):
            logger.removeHandler(handler)
            handler.close()
    logger.propagate = True
    logger.setLevel(logging.NOTSET)


@pytest.fixture
def blocked_dir(tmp_path):
    """A regular file standing where an output directory would have to be created."""
    blocker = tmp_path / "blocker"
    blocker.write_text("not a directory", encoding="utf-8")
    return blocker
