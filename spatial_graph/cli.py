"""
Command-line entry point: load record files, analyze, report and export.

    spatial-graph nodes.csv edges.csv --source 1 --target 5 --diagram graph.png
"""

import argparse
import logging
import sys
import time
from typing import List, Optional, Sequence, Tuple

from rich.console import Console
from rich.markup import escape
from rich.prompt import IntPrompt

from .config.analysis_config import AnalysisConfig
from .core.exceptions import (
    ConfigurationError,
    DuplicateVertexError,
    EmptyInputError,
    RecordLoadError,
)
from .core.models import IdMapping
from .graph.spatial_graph import SpatialGraph
from .utils.logging_utils import setup_logging

logger = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_FATAL = 1
EXIT_OUTPUT_FAILED = 2


def parse_pairs(value: str) -> List[Tuple[int, int]]:
    """Parse ``"1:5,1:10"`` into ``[(1, 5), (1, 10)]``."""
    pairs = []
    for item in value.split(","):
        item = item.strip()
        if not item:
            continue
        source, sep, target = item.partition(":")
        if not sep:
            raise argparse.ArgumentTypeError(f"Node pair must look like SOURCE:TARGET, got '{item}'")
        try:
            pairs.append((int(source), int(target)))
        except ValueError:
            raise argparse.ArgumentTypeError(f"Node pair ids must be integers, got '{item}'")
    if not pairs:
        raise argparse.ArgumentTypeError("At least one node pair is required")
    return pairs


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="spatial-graph",
        description="Analyze a weighted undirected graph built from 3D vertex and edge records.",
    )
    parser.add_argument("nodes", help="Node record file (id;x;y;z)")
    parser.add_argument("edges", help="Edge record file (source;target)")
    parser.add_argument("--paths-csv", help="Path table output file (default: paths.csv)")
    parser.add_argument("--diagram", help="Diagram output file, .dot or .png (default: graph.dot)")
    parser.add_argument("--source", type=int, help="Source vertex id of the reported shortest path")
    parser.add_argument("--target", type=int, help="Target vertex id of the reported shortest path")
    parser.add_argument("--pairs", type=parse_pairs, help="Node pairs for the path table, e.g. 1:5,1:10")
    parser.add_argument("--config", help="JSON configuration file")
    parser.add_argument("--id-mapping", choices=[m.value for m in IdMapping],
                        help="How vertex ids map to internal indices")
    parser.add_argument("--log-level", help="Logging level (default: INFO)")
    parser.add_argument("--log-file", help="Also write log records to this file")
    return parser


def load_config(args: argparse.Namespace) -> AnalysisConfig:
    config = AnalysisConfig.from_file(args.config) if args.config else AnalysisConfig()
    return config.update(
        paths_csv=args.paths_csv,
        diagram_path=args.diagram,
        node_pairs=args.pairs,
        id_mapping=args.id_mapping,
        log_level=args.log_level,
        log_file=args.log_file,
    )


def resolve_endpoints(args: argparse.Namespace, console: Console) -> Tuple[Optional[int], Optional[int]]:
    """Endpoints from the flags, or from a prompt when stdin is interactive."""
    source, target = args.source, args.target
    if source is not None and target is not None:
        return source, target
    if not sys.stdin.isatty():
        return None, None
    if source is None:
        source = IntPrompt.ask("Source vertex id", console=console)
    if target is None:
        target = IntPrompt.ask("Target vertex id", console=console)
    return source, target


def main(argv: Optional[Sequence[str]] = None, console: Optional[Console] = None) -> int:
    started = time.perf_counter()
    args = build_parser().parse_args(argv)
    console = console or Console()

    try:
        config = load_config(args)
    except ConfigurationError as e:
        setup_logging()
        logger.error("Invalid configuration: %s", e)
        return EXIT_FATAL

    setup_logging(level=config.log_level, log_file=config.log_file or None)

    try:
        graph = SpatialGraph.from_files(args.nodes, args.edges, config=config)
    except (RecordLoadError, EmptyInputError, DuplicateVertexError) as e:
        logger.error("Cannot build graph: %s", e)
        return EXIT_FATAL

    source, target = resolve_endpoints(args, console)
    report = graph.analyze(source=source, target=target)
    graph.print_report(report, console=console)

    failures = graph.export()
    for failure in failures:
        console.print(f"[red]Output failed:[/red] {escape(str(failure))}")

    total_ms = (time.perf_counter() - started) * 1000.0
    console.print(f"Total time: {total_ms:.0f} ms")
    return EXIT_OUTPUT_FAILED if failures else EXIT_OK


if __name__ == "__main__":
    sys.exit(main())
