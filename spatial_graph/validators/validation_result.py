"""
Diagnostics collected during one analysis run.

The loader, the builder, the path queries and the exporters all write to
the same ValidationResult instance, each entry tagged with the stage that
produced it so the report can group them.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, List, Optional

# Stages writing diagnostics
LOADER = "loader"
BUILDER = "builder"
PATH_QUERY = "path"
EXPORT = "export"


class Severity(Enum):
    ERROR = "error"
    WARNING = "warning"
    INFO = "info"


@dataclass(frozen=True)
class Diagnostic:
    severity: Severity
    source: str
    message: str

    def __str__(self) -> str:
        return f"[{self.source}] {self.message}"


class ValidationResult:
    """
    Errors, warnings and info messages of a run, in the order they occurred.

    Errors mark the run as invalid. Warnings are recovered problems such as
    skipped records; infos are expected outcomes such as a rejected
    duplicate edge or a disconnected path query.
    """

    def __init__(self):
        self.entries: List[Diagnostic] = []
        self.details: Dict[str, Any] = {}

    def add(self, severity: Severity, message: str, source: str) -> Diagnostic:
        entry = Diagnostic(severity, source, message)
        self.entries.append(entry)
        return entry

    def add_error(self, message: str, source: str) -> Diagnostic:
        return self.add(Severity.ERROR, message, source)

    def add_warning(self, message: str, source: str) -> Diagnostic:
        return self.add(Severity.WARNING, message, source)

    def add_info(self, message: str, source: str) -> Diagnostic:
        return self.add(Severity.INFO, message, source)

    def select(self, severity: Optional[Severity] = None, source: Optional[str] = None) -> List[Diagnostic]:
        """Entries matching ``severity`` and ``source``; None matches any."""
        return [
            e for e in self.entries
            if (severity is None or e.severity is severity)
            and (source is None or e.source == source)
        ]

    def by_source(self, severity: Optional[Severity] = None) -> Dict[str, List[Diagnostic]]:
        """Entries grouped by stage, stages in order of first appearance."""
        groups: Dict[str, List[Diagnostic]] = {}
        for entry in self.select(severity):
            groups.setdefault(entry.source, []).append(entry)
        return groups

    @property
    def errors(self) -> List[str]:
        return [e.message for e in self.select(Severity.ERROR)]

    @property
    def warnings(self) -> List[str]:
        return [e.message for e in self.select(Severity.WARNING)]

    @property
    def infos(self) -> List[str]:
        return [e.message for e in self.select(Severity.INFO)]

    @property
    def is_valid(self) -> bool:
        return not self.select(Severity.ERROR)

    @property
    def has_issues(self) -> bool:
        return any(e.severity is not Severity.INFO for e in self.entries)

    def get_summary(self) -> Dict[str, int]:
        return {
            'errors': len(self.errors),
            'warnings': len(self.warnings),
            'infos': len(self.infos),
        }

    def __str__(self) -> str:
        summary = self.get_summary()
        status = "VALID" if self.is_valid else "INVALID"
        return f"ValidationResult({status}, errors={summary['errors']}, warnings={summary['warnings']}, infos={summary['infos']})"
