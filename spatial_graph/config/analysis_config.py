"""
Configuration for graph analysis runs.

This module centralizes record-parsing, id-mapping, export and logging
settings so the loaders, the graph store and the exporters behave
consistently for one run.
"""

import json
import logging
from dataclasses import asdict, dataclass, field, fields
from pathlib import Path
from typing import Any, Dict, List, Tuple

from ..core.exceptions import ConfigurationError
from ..core.models import IdMapping

logger = logging.getLogger(__name__)

# Node pairs written to the path table when none are configured
DEFAULT_NODE_PAIRS: List[Tuple[int, int]] = [
    (1, 5), (1, 10), (1, 15), (1, 20),
    (5, 10), (5, 15), (5, 20),
    (10, 15), (10, 20),
    (15, 20),
]

_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


@dataclass
class AnalysisConfig:
    """
    Configuration settings for one analysis run.

    Values loaded from a JSON file may be overridden afterwards with
    :meth:`update` (the CLI does this for its flags).
    """

    # Record files
    delimiter: str = ";"
    has_header: bool = True
    encoding: str = "utf-8"

    # Graph construction
    id_mapping: str = IdMapping.EXPLICIT.value

    # Outputs
    paths_csv: str = "paths.csv"
    diagram_path: str = "graph.dot"
    node_pairs: List[Tuple[int, int]] = field(default_factory=lambda: list(DEFAULT_NODE_PAIRS))
    decimals: int = 2

    # Diagram styling
    graphviz_engine: str = "dot"
    path_color: str = "red"
    path_penwidth: int = 2
    figure_size: Tuple[int, int] = (12, 8)

    # Diagnostics
    log_level: str = "INFO"
    log_file: str = ""

    def __post_init__(self):
        """Normalize and check values."""
        self.node_pairs = [tuple(pair) for pair in self.node_pairs]
        self.figure_size = tuple(self.figure_size)
        self.log_level = str(self.log_level).upper()
        self._check()

    def _check(self) -> None:
        try:
            IdMapping(self.id_mapping)
        except ValueError:
            raise ConfigurationError(
                f"Unknown id mapping '{self.id_mapping}'",
                details={'allowed': [m.value for m in IdMapping]},
            )
        if len(self.delimiter) != 1:
            raise ConfigurationError(f"Delimiter must be a single character, got {self.delimiter!r}")
        if self.decimals < 0:
            raise ConfigurationError(f"decimals cannot be negative: {self.decimals}")
        if self.log_level not in _LOG_LEVELS:
            raise ConfigurationError(f"Unknown log level '{self.log_level}'")
        for pair in self.node_pairs:
            if len(pair) != 2 or not all(isinstance(v, int) for v in pair):
                raise ConfigurationError(f"Node pair must be two integer ids, got {pair!r}")

    @property
    def id_mapping_policy(self) -> IdMapping:
        return IdMapping(self.id_mapping)

    def get_setting(self, key: str, default: Any = None) -> Any:
        """Get a setting value, or ``default`` for unknown keys."""
        return getattr(self, key, default)

    def update(self, **overrides: Any) -> 'AnalysisConfig':
        """Apply overrides in place, ignoring None values; returns self."""
        known = {f.name for f in fields(self)}
        for key, value in overrides.items():
            if value is None:
                continue
            if key not in known:
                raise ConfigurationError(f"Unknown configuration key '{key}'")
            setattr(self, key, value)
        self.__post_init__()
        return self

    def to_dict(self) -> Dict[str, Any]:
        data = asdict(self)
        data['node_pairs'] = [list(pair) for pair in self.node_pairs]
        data['figure_size'] = list(self.figure_size)
        return data

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'AnalysisConfig':
        known = {f.name for f in fields(cls)}
        unknown = sorted(set(data) - known)
        if unknown:
            raise ConfigurationError("Unknown configuration keys", details={'keys': unknown})
        try:
            return cls(**data)
        except TypeError as e:
            raise ConfigurationError(f"Invalid configuration values: {e}")

    @classmethod
    def from_file(cls, config_path: str) -> 'AnalysisConfig':
        """Load configuration from a JSON file."""
        path = Path(config_path)
        if not path.exists():
            raise ConfigurationError(f"Configuration file not found: {path}")

        try:
            with open(path, 'r', encoding='utf-8') as f:
                data = json.load(f)
        except json.JSONDecodeError as e:
            raise ConfigurationError(f"Invalid JSON in configuration file {path}: {e}")
        except OSError as e:
            raise ConfigurationError(f"Failed to load configuration from {path}: {e}")

        if not isinstance(data, dict):
            raise ConfigurationError(f"Configuration file {path} must contain a JSON object")

        config = cls.from_dict(data)
        logger.info("Loaded analysis configuration from: %s", path)
        return config

    def save_to_file(self, config_path: str) -> None:
        path = Path(config_path)
        path.parent.mkdir(parents=True, exist_ok=True)
        with open(path, 'w', encoding='utf-8') as f:
            json.dump(self.to_dict(), f, indent=2)
