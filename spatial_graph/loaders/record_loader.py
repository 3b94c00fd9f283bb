"""
Loaders for node and edge record files.

Both files are delimiter-separated text with an optional header line:

    id;x;y;z          source;target
    1;0.0;0.0;0.0     1;2
    2;3.0;0.0;0.0     2;3

Malformed rows are skipped and reported; the graph store only ever sees
well-typed records.
"""

import csv
import logging
from typing import Iterator, List, Optional, Tuple

from ..core.exceptions import RecordLoadError
from ..core.models import Vertex
from ..validators.validation_result import LOADER, ValidationResult

logger = logging.getLogger(__name__)

EdgeRecord = Tuple[int, int]


class RecordLoader:
    """
    Reads node and edge records using the delimiter/header settings of a config.

    Skipped rows are collected in :attr:`diagnostics`.
    """

    def __init__(self, delimiter: str = ";", has_header: bool = True, encoding: str = "utf-8",
                 diagnostics: Optional[ValidationResult] = None):
        self.delimiter = delimiter
        self.has_header = has_header
        self.encoding = encoding
        self.diagnostics = diagnostics if diagnostics is not None else ValidationResult()

    @classmethod
    def from_config(cls, config, diagnostics: Optional[ValidationResult] = None) -> 'RecordLoader':
        return cls(
            delimiter=config.delimiter,
            has_header=config.has_header,
            encoding=config.encoding,
            diagnostics=diagnostics,
        )

    def _rows(self, path: str) -> Iterator[Tuple[int, List[str]]]:
        """Yield (line number, non-empty stripped fields) for each data row."""
        try:
            with open(path, 'r', encoding=self.encoding, newline='') as f:
                reader = csv.reader(f, delimiter=self.delimiter)
                for line_no, row in enumerate(reader, start=1):
                    if line_no == 1 and self.has_header:
                        continue
                    fields = [value.strip() for value in row if value.strip()]
                    if fields:
                        yield line_no, fields
        except OSError as e:
            raise RecordLoadError(f"Cannot read record file: {e.strerror or e}", path=str(path))
        except (UnicodeDecodeError, csv.Error) as e:
            raise RecordLoadError(f"Cannot parse record file: {e}", path=str(path))

    def _skip(self, path: str, line_no: int, reason: str) -> None:
        message = f"{path}:{line_no}: {reason}, row skipped"
        logger.warning(message)
        self.diagnostics.add_warning(message, LOADER)

    def load_nodes(self, path: str) -> List[Vertex]:
        """
        Load vertex records in file order.

        Args:
            path: Node record file (id, x, y, z per row)

        Returns:
            List of Vertex records
        """
        vertices: List[Vertex] = []
        for line_no, fields in self._rows(path):
            if len(fields) < 4:
                self._skip(path, line_no, f"expected id and 3 coordinates, got {len(fields)} field(s)")
                continue
            try:
                vertex = Vertex(
                    external_id=int(fields[0]),
                    x=float(fields[1]),
                    y=float(fields[2]),
                    z=float(fields[3]),
                )
            except ValueError as e:
                self._skip(path, line_no, f"non-numeric value ({e})")
                continue
            vertices.append(vertex)

        logger.info("Loaded %d node record(s) from %s", len(vertices), path)
        return vertices

    def load_edges(self, path: str) -> List[EdgeRecord]:
        """
        Load edge records in file order.

        Args:
            path: Edge record file (source id, target id per row)

        Returns:
            List of (source_id, target_id) pairs
        """
        edges: List[EdgeRecord] = []
        for line_no, fields in self._rows(path):
            if len(fields) < 2:
                self._skip(path, line_no, "expected source and target ids")
                continue
            try:
                edges.append((int(fields[0]), int(fields[1])))
            except ValueError as e:
                self._skip(path, line_no, f"non-numeric id ({e})")

        logger.info("Loaded %d edge record(s) from %s", len(edges), path)
        return edges


def load_node_records(path: str, delimiter: str = ";", has_header: bool = True) -> List[Vertex]:
    return RecordLoader(delimiter=delimiter, has_header=has_header).load_nodes(path)


def load_edge_records(path: str, delimiter: str = ";", has_header: bool = True) -> List[EdgeRecord]:
    return RecordLoader(delimiter=delimiter, has_header=has_header).load_edges(path)
