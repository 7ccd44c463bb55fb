"""
SizeGuard - Bundle Size Budgets

Enforces per-artifact size limits on build output.
"""

__version__ = "1.0.0"

from sizeguard.schemas import BundleConfig, BundleRule
from sizeguard.budget import (
    CollectingSink,
    EnforcementEngine,
    EnforcementOptions,
    discover_artifacts,
    format_size,
    load_config,
)

__all__ = [
    "__version__",
    "BundleConfig",
    "BundleRule",
    "CollectingSink",
    "EnforcementEngine",
    "EnforcementOptions",
    "discover_artifacts",
    "format_size",
    "load_config",
]
