"""
Pytest configuration for SizeGuard test suite.

This conftest.py provides:
- Machine-mode logging (suppresses console output)
- Clean SIZEGUARD_* environment per test
- Rule and output directory fixtures
"""

import json
import os
from pathlib import Path

import pytest

from sizeguard.logging_config import setup_logging
from sizeguard.budget import parse_size, reset_options
from sizeguard.cli.config import CLIConfig
from sizeguard.schemas import BundleConfig, BundleRule


# ============================================================================
# GLOBAL CONFIGURATION
# ============================================================================

def pytest_configure(config):
    """Configure pytest for quiet machine-mode operation."""
    os.environ.setdefault("SIZEGUARD_MACHINE_MODE", "1")


# ============================================================================
# LOGGING / ENVIRONMENT FIXTURES
# ============================================================================

@pytest.fixture(autouse=True)
def setup_test_logging():
    """
    Machine mode by default - suppress console logs for clean test output.
    """
    setup_logging(level="DEBUG", suppress_console=True)


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    """Drop SIZEGUARD_* option overrides and cached options around each test."""
    for key in ("SIZEGUARD_EXTENSIONS", "SIZEGUARD_ENFORCE_FOR_ALL_BUNDLES",
                "SIZEGUARD_CONFIG", "SIZEGUARD_HUMAN_MODE"):
        monkeypatch.delenv(key, raising=False)
    reset_options()
    CLIConfig.reset()
    yield
    reset_options()
    CLIConfig.reset()


# ============================================================================
# DATA FIXTURES
# ============================================================================

def make_rule(name: str, max_size: str = "100 KB") -> BundleRule:
    size_in_bytes, unit = parse_size(max_size)
    return BundleRule(name=name, max_size_in_bytes=size_in_bytes, max_size=max_size, unit=unit)


@pytest.fixture
def rule():
    """Factory fixture: rule("main.js", "10 KB")."""
    return make_rule


@pytest.fixture
def output_dir(tmp_path):
    """
    A small build output directory.

    dist/
    ├── main.js            2048 bytes
    ├── main.js.map        9000 bytes
    ├── vendor.abc123.js   1536 bytes
    └── css/app.css         300 bytes
    """
    dist = tmp_path / "dist"
    (dist / "css").mkdir(parents=True)
    (dist / "main.js").write_bytes(b"x" * 2048)
    (dist / "main.js.map").write_bytes(b"x" * 9000)
    (dist / "vendor.abc123.js").write_bytes(b"x" * 1536)
    (dist / "css" / "app.css").write_bytes(b"x" * 300)
    return dist


@pytest.fixture
def write_config(tmp_path):
    """Factory fixture writing a budget file and returning its path."""
    def _write(bundles, name="sizeguard.config.json") -> Path:
        path = tmp_path / name
        path.write_text(json.dumps({"bundles": bundles}), encoding="utf-8")
        return path
    return _write


@pytest.fixture
def config_of():
    """Factory fixture: config_of(rule_a, rule_b) -> BundleConfig."""
    return lambda *rules: BundleConfig(bundles=list(rules))
