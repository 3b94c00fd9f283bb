"""
Path table export: shortest paths for a list of node pairs as CSV.
"""

import csv
import logging
from typing import Iterable, List, Optional, Sequence, Tuple

from ..core.exceptions import ResourceError
from ..core.models import PathResult
from ..graph.constants import NO_PATH_MARKER, PATH_SEPARATOR, PATH_TABLE_HEADER
from ..graph.shortest_path import ShortestPathEngine

logger = logging.getLogger(__name__)


def format_row(result: PathResult, decimals: int = 2) -> List[str]:
    """
    One table row: source, target, distance, arrow-joined path.

    Failed queries keep the ``-1`` distance sentinel and the "No path" marker.
    """
    distance, path = result.to_tuple()
    rendered_path = PATH_SEPARATOR.join(str(v) for v in path) if path else NO_PATH_MARKER
    return [str(result.source), str(result.target), f"{distance:.{decimals}f}", rendered_path]


def compute_path_rows(
    store,
    node_pairs: Iterable[Tuple[int, int]],
    engine: Optional[ShortestPathEngine] = None,
) -> List[PathResult]:
    engine = engine or ShortestPathEngine(store)
    return [engine.shortest_path(source, target) for source, target in node_pairs]


def write_path_table(
    store,
    node_pairs: Sequence[Tuple[int, int]],
    filepath: str,
    delimiter: str = ";",
    decimals: int = 2,
    engine: Optional[ShortestPathEngine] = None,
) -> List[PathResult]:
    """
    Compute the shortest path of every pair and write them to ``filepath``.

    Args:
        store: GraphStore to query
        node_pairs: (source_id, target_id) pairs of external ids
        filepath: Destination CSV file
        delimiter: Column separator
        decimals: Digits after the decimal point for distances
        engine: Optional engine whose cached Dijkstra trees are reused

    Returns:
        The PathResult of every pair, in input order

    Raises:
        ResourceError: if the file cannot be created
    """
    results = compute_path_rows(store, node_pairs, engine=engine)

    try:
        with open(filepath, 'w', encoding='utf-8', newline='') as f:
            writer = csv.writer(f, delimiter=delimiter, lineterminator='\n')
            writer.writerow(PATH_TABLE_HEADER)
            for result in results:
                writer.writerow(format_row(result, decimals))
    except OSError as e:
        raise ResourceError(f"Cannot create path table: {e.strerror or e}", path=str(filepath))

    found = sum(1 for r in results if r.found)
    logger.info("Path table written: %s (%d of %d pairs connected)", filepath, found, len(results))
    return results
