"""
Build Diagnostics.

The sink is owned by the host pipeline; the engine only ever appends.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import List, Protocol


class DiagnosticKind(str, Enum):
    ERROR = "error"
    WARNING = "warning"


# Diagnostic codes
CONFIG_AMBIGUITY = "CONFIG_AMBIGUITY"
MISSING_CONFIG = "MISSING_CONFIG"
SIZE_EXCEEDED = "SIZE_EXCEEDED"
PROBE_IO = "PROBE_IO"


@dataclass(frozen=True)
class Diagnostic:
    """A single error or warning raised for one artifact."""

    kind: DiagnosticKind
    message: str
    file_name: str = ""
    code: str = ""

    @property
    def is_error(self) -> bool:
        return self.kind is DiagnosticKind.ERROR

    def to_dict(self) -> dict:
        return {
            "kind": self.kind.value,
            "code": self.code,
            "file": self.file_name,
            "message": self.message,
        }


class DiagnosticSink(Protocol):
    def append_error(self, message: str) -> None:
        ...

    def append_warning(self, message: str) -> None:
        ...


def emit(sink: DiagnosticSink, diagnostic: Diagnostic) -> None:
    """Append a diagnostic to the sink under its severity."""
    if diagnostic.is_error:
        sink.append_error(diagnostic.message)
    else:
        sink.append_warning(diagnostic.message)


@dataclass
class CollectingSink:
    """In-memory sink with two append-only lists, for CLI runs and tests."""

    errors: List[str] = field(default_factory=list)
    warnings: List[str] = field(default_factory=list)

    def append_error(self, message: str) -> None:
        self.errors.append(message)

    def append_warning(self, message: str) -> None:
        self.warnings.append(message)

    @property
    def has_errors(self) -> bool:
        return bool(self.errors)

    def to_dict(self) -> dict:
        return {
            "errors": list(self.errors),
            "warnings": list(self.warnings),
        }
