"""
Graph visualizer for spatial graphs.

Diagrams are described in the Graphviz DOT language: one node per vertex
labelled with its external id, one edge per graph edge labelled with its
weight. Edges flagged ``in_path`` are drawn in the highlight colour.
"""

import logging
from pathlib import Path
from typing import Optional

import graphviz

from ..core.exceptions import ResourceError

logger = logging.getLogger(__name__)


class GraphVisualizer:
    """
    Writes DOT descriptions and PNG renderings of a graph store.
    """

    def __init__(
        self,
        engine: str = "dot",
        decimals: int = 2,
        path_color: str = "red",
        path_penwidth: int = 2,
        figure_size=(12, 8),
    ):
        self.engine = engine
        self.decimals = decimals
        self.path_color = path_color
        self.path_penwidth = path_penwidth
        self.figure_size = tuple(figure_size)

    @classmethod
    def from_config(cls, config) -> 'GraphVisualizer':
        return cls(
            engine=config.graphviz_engine,
            decimals=config.decimals,
            path_color=config.path_color,
            path_penwidth=config.path_penwidth,
            figure_size=config.figure_size,
        )

    def build_dot(self, store, name: str = "G") -> graphviz.Graph:
        """Build the undirected Graphviz graph for ``store``."""
        dot = graphviz.Graph(name, engine=self.engine)

        for index in range(store.vertex_count()):
            dot.node(str(index), label=str(store.external_id(index)))

        for edge in store.edges():
            attrs = {"label": f"{edge.weight:.{self.decimals}f}"}
            if edge.in_path:
                attrs["color"] = self.path_color
                attrs["penwidth"] = str(self.path_penwidth)
            dot.edge(str(edge.u), str(edge.v), **attrs)

        return dot

    def draw_graph(self, store, filepath: str) -> str:
        """
        Write the diagram of ``store`` to ``filepath``.

        A ``.png`` path is rendered with Graphviz, or with matplotlib when
        the Graphviz executables are not installed. Any other suffix gets
        the DOT source.

        Returns:
            The path written

        Raises:
            ResourceError: if the file cannot be created
        """
        path = Path(filepath)
        dot = self.build_dot(store)

        if path.suffix.lower() != ".png":
            try:
                dot.save(filename=str(path))
            except OSError as e:
                raise ResourceError(f"Cannot create DOT file: {e.strerror or e}", path=str(path))
            logger.info("DOT file written: %s", path)
            logger.info("To render it, run: dot -Tpng %s -o %s", path, path.with_suffix(".png"))
            return str(path)

        # render() saves the DOT source next to the PNG and only removes it
        # after a successful run of the dot executable
        source_path = path.with_suffix(".gv")
        try:
            dot.render(filename=str(source_path), outfile=str(path), format="png", cleanup=True)
        except graphviz.ExecutableNotFound:
            self._remove_source(source_path)
            logger.warning("Graphviz executable not found, drawing %s with matplotlib", path)
            return self.draw_graph_matplotlib(store, str(path))
        except graphviz.CalledProcessError as e:
            self._remove_source(source_path)
            raise ResourceError("Graphviz rendering failed", path=str(path),
                                details={"returncode": e.returncode})
        except OSError as e:
            raise ResourceError(f"Cannot create PNG file: {e.strerror or e}", path=str(path))

        logger.info("PNG diagram written: %s", path)
        return str(path)

    @staticmethod
    def _remove_source(source_path: Path) -> None:
        if source_path.exists():
            source_path.unlink()

    def draw_graph_matplotlib(self, store, filepath: str) -> str:
        """
        Draw the x/y projection of ``store`` with matplotlib and save it.

        Args:
            store: GraphStore to draw
            filepath: Image path; the format follows its suffix

        Returns:
            The path written
        """
        import matplotlib
        # Non-interactive backend, set before pyplot is imported
        if matplotlib.get_backend().lower() != 'agg':
            matplotlib.use('Agg')
        import matplotlib.pyplot as plt

        fig, ax = plt.subplots(figsize=self.figure_size)
        try:
            for edge in store.edges():
                a = store.vertex(edge.u)
                b = store.vertex(edge.v)
                color = self.path_color if edge.in_path else "black"
                width = self.path_penwidth if edge.in_path else 1
                ax.plot([a.x, b.x], [a.y, b.y], color=color, linewidth=width, zorder=1)
                ax.annotate(f"{edge.weight:.{self.decimals}f}",
                            ((a.x + b.x) / 2, (a.y + b.y) / 2),
                            fontsize=8, ha='center', va='center')

            xs = [v.x for v in store.vertices()]
            ys = [v.y for v in store.vertices()]
            ax.scatter(xs, ys, s=300, c="lightblue", edgecolors="black", zorder=2)
            for index, vertex in enumerate(store.vertices()):
                ax.annotate(str(store.external_id(index)), (vertex.x, vertex.y),
                            ha='center', va='center', fontsize=9, zorder=3)

            ax.set_aspect('equal', adjustable='datalim')
            ax.set_axis_off()
            try:
                fig.savefig(filepath, bbox_inches='tight')
            except OSError as e:
                raise ResourceError(f"Cannot create image file: {e.strerror or e}", path=filepath)
        finally:
            plt.close(fig)

        logger.info("Diagram drawn with matplotlib: %s", filepath)
        return filepath

    def to_source(self, store) -> str:
        """DOT source text for ``store``."""
        return self.build_dot(store).source
