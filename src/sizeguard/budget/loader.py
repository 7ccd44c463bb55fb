"""
Budget File Loading.

Locates and parses the JSON budget file:

    {
      "bundles": [
        {"name": "main.js", "maxSize": "100 KB"},
        {"name": "^vendor\\..*\\.js$", "maxSize": "1.5 MB"}
      ]
    }
"""

import json
from pathlib import Path
from typing import Any, List, Optional, Union

from loguru import logger
from pydantic import ValidationError

from sizeguard.exceptions import ConfigError, DuplicateRuleError, InvalidSizeError
from sizeguard.schemas import BundleConfig, BundleRule
from .config import DEFAULT_CONFIG_NAME
from .units import parse_size


def find_config_file(
    project_root: Optional[Path] = None,
    config_path: Optional[Union[str, Path]] = None,
) -> Path:
    """
    Resolve the budget file location.

    Args:
        project_root: Directory relative paths are resolved against (defaults to CWD)
        config_path: Explicit path; defaults to sizeguard.config.json

    Returns:
        Path to an existing config file

    Raises:
        ConfigError: If the file does not exist
    """
    root = project_root or Path.cwd()
    path = Path(config_path) if config_path else Path(DEFAULT_CONFIG_NAME)
    if not path.is_absolute():
        path = root / path

    if not path.is_file():
        raise ConfigError("config file not found", path=str(path))
    return path


def prepare_config(raw: Any, source: Optional[str] = None) -> BundleConfig:
    """
    Validate raw config data and compute byte limits.

    Raises:
        ConfigError: On malformed entries, bad sizes or duplicate names
    """
    where = source or ""
    if not isinstance(raw, dict) or not isinstance(raw.get("bundles"), list):
        raise ConfigError("expected an object with a 'bundles' list", path=where)

    rules: List[BundleRule] = []
    seen = set()
    for index, entry in enumerate(raw["bundles"]):
        if not isinstance(entry, dict):
            raise ConfigError(f"bundles[{index}] must be an object", path=where)

        name = entry.get("name")
        max_size = entry.get("maxSize")
        if not isinstance(name, str) or not name:
            raise ConfigError(f"bundles[{index}] is missing 'name'", path=where)
        if max_size is None:
            raise ConfigError(f"bundles[{index}] ('{name}') is missing 'maxSize'", path=where)
        if name in seen:
            raise DuplicateRuleError(name, path=where)
        seen.add(name)

        try:
            size_in_bytes, unit = parse_size(max_size)
        except InvalidSizeError as e:
            raise ConfigError(f"bundles[{index}] ('{name}'): {e}", path=where) from e

        try:
            rules.append(BundleRule(
                name=name,
                max_size_in_bytes=size_in_bytes,
                max_size=max_size.strip(),
                unit=unit,
            ))
        except ValidationError as e:
            raise ConfigError(f"bundles[{index}] is invalid: {e}", path=where) from e

    logger.debug(f"Prepared {len(rules)} bundle rule(s) from {where or '<memory>'}")
    return BundleConfig(bundles=rules, source=source)


def load_config(path: Union[str, Path]) -> BundleConfig:
    """
    Load and prepare a budget file.

    Raises:
        ConfigError: If the file cannot be read or parsed
    """
    path = Path(path)
    try:
        with open(path, 'r', encoding='utf-8') as f:
            raw = json.load(f)
    except json.JSONDecodeError as e:
        raise ConfigError(f"invalid JSON: {e}", path=str(path)) from e
    except OSError as e:
        raise ConfigError(f"cannot read config: {e}", path=str(path)) from e

    return prepare_config(raw, source=str(path))
