"""
Bundle Size Budgets.

Per-artifact size enforcement for build output.

Components:
- units: byte denominations, size parsing and formatting
- matcher: BundleMatcher, exact-then-pattern rule resolution
- probe: SizeProbe protocol and filesystem implementation
- diagnostics: Diagnostic records and the host-owned sink protocol
- engine: EnforcementEngine, one run per build
- loader: budget file discovery and parsing
- config: EnforcementOptions with env var support

Usage:
    from sizeguard.budget import load_config, EnforcementEngine, CollectingSink

    sink = CollectingSink()
    EnforcementEngine(load_config("sizeguard.config.json")).run(names, "dist", sink)
"""

from .units import DENOMINATIONS, format_size, parse_size
from .matcher import BundleMatcher, MatchKind, MatchResult
from .probe import SizeProbe, FileSizeProbe, StaticSizeProbe
from .diagnostics import (
    CollectingSink,
    Diagnostic,
    DiagnosticKind,
    DiagnosticSink,
)
from .engine import ArtifactOutcome, EnforcementEngine, EnforcementReport
from .loader import find_config_file, load_config, prepare_config
from .config import (
    DEFAULT_CONFIG_NAME,
    EnforcementOptions,
    get_options,
    reset_options,
)
from .assets import discover_artifacts

__all__ = [
    # Units
    "DENOMINATIONS",
    "format_size",
    "parse_size",
    # Matching
    "BundleMatcher",
    "MatchKind",
    "MatchResult",
    # Probing
    "SizeProbe",
    "FileSizeProbe",
    "StaticSizeProbe",
    # Diagnostics
    "CollectingSink",
    "Diagnostic",
    "DiagnosticKind",
    "DiagnosticSink",
    # Enforcement
    "ArtifactOutcome",
    "EnforcementEngine",
    "EnforcementReport",
    # Config
    "find_config_file",
    "load_config",
    "prepare_config",
    "DEFAULT_CONFIG_NAME",
    "EnforcementOptions",
    "get_options",
    "reset_options",
    "discover_artifacts",
]
