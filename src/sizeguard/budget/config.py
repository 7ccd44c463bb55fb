"""
Enforcement Options.

Options the host passes to each enforcement run. Defaults come from
SIZEGUARD_* environment variables so CI can tune behaviour without
touching the config file.
"""

import os
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional


DEFAULT_CONFIG_NAME = "sizeguard.config.json"


def _env_list(key: str) -> List[str]:
    """Read a comma-separated list from an environment variable."""
    value = os.getenv(key, "")
    return [item.strip() for item in value.split(",") if item.strip()]


def _env_bool(key: str, default: bool) -> bool:
    """Read boolean from environment variable."""
    value = os.getenv(key, "").lower()
    if value in ("true", "1", "yes"):
        return True
    if value in ("false", "0", "no"):
        return False
    return default


@dataclass
class EnforcementOptions:
    """
    Per-build enforcement options.

    Environment Variables:
        SIZEGUARD_EXTENSIONS: Comma-separated suffixes to skip (default: none)
        SIZEGUARD_ENFORCE_FOR_ALL_BUNDLES: If "true", artifacts without a
            budget are errors instead of warnings (default: false)
        SIZEGUARD_CONFIG: Path to the budget file (default: sizeguard.config.json)
    """

    extensions: List[str] = field(default_factory=lambda: _env_list("SIZEGUARD_EXTENSIONS"))
    enforce_for_all_bundles: bool = field(default_factory=lambda: _env_bool(
        "SIZEGUARD_ENFORCE_FOR_ALL_BUNDLES", False
    ))
    config_path: Optional[str] = field(default_factory=lambda: os.getenv("SIZEGUARD_CONFIG") or None)

    def __post_init__(self):
        self.extensions = [ext.strip() for ext in self.extensions if ext and ext.strip()]

    def is_excluded(self, file_name: str) -> bool:
        """True if file_name ends with one of the excluded extensions."""
        return bool(self.extensions) and file_name.endswith(tuple(self.extensions))

    def to_dict(self) -> Dict[str, Any]:
        return {
            "extensions": list(self.extensions),
            "enforce_for_all_bundles": self.enforce_for_all_bundles,
            "config_path": self.config_path,
        }


# Global instance for convenience
_default_options: Optional[EnforcementOptions] = None


def get_options() -> EnforcementOptions:
    """Get the global enforcement options."""
    global _default_options
    if _default_options is None:
        _default_options = EnforcementOptions()
    return _default_options


def reset_options() -> None:
    """Reset global options (useful after env var changes or for testing)."""
    global _default_options
    _default_options = None
