"""
Core interfaces for the spatial graph package.

This module defines the abstract base classes that define the contract
for the analyzers and builders working on a graph store.
"""

from abc import ABC, abstractmethod
from typing import Any, Iterable, Sequence, Tuple


class GraphAnalyzer(ABC):
    """
    Abstract base class for graph analyzers.

    Analyzers are read-only passes over a built graph store; they never
    modify vertices or edges.
    """

    @abstractmethod
    def analyze(self, store) -> Any:
        """
        Analyze the given graph store.

        Args:
            store: The GraphStore to analyze

        Returns:
            Analyzer-specific result object
        """
        pass


class GraphBuilder(ABC):
    """
    Abstract base class for graph builders.

    Graph builders are responsible for constructing graph stores
    from node and edge records.
    """

    @abstractmethod
    def build_from_records(
        self,
        vertices: Sequence[Any],
        edges: Iterable[Tuple[int, int]],
    ) -> Any:
        """
        Build a graph store from in-memory records.

        Args:
            vertices: Ordered vertex records
            edges: (source_id, target_id) pairs of external ids

        Returns:
            Built graph store
        """
        pass

    @abstractmethod
    def build_from_files(self, nodes_path: str, edges_path: str) -> Any:
        """
        Build a graph store from record files.

        Args:
            nodes_path: Path to the node record file
            edges_path: Path to the edge record file

        Returns:
            Built graph store
        """
        pass
