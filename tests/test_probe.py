"""
Tests for size probes and output directory discovery.
"""

import pytest

from sizeguard.budget.assets import discover_artifacts
from sizeguard.budget.probe import FileSizeProbe, StaticSizeProbe
from sizeguard.exceptions import ProbeIOError, SizeGuardError


class TestFileSizeProbe:

    def test_measures_bytes(self, output_dir):
        assert FileSizeProbe().measure("main.js", output_dir) == 2048

    def test_nested_artifact(self, output_dir):
        assert FileSizeProbe().measure("css/app.css", str(output_dir)) == 300

    def test_missing_file(self, output_dir):
        with pytest.raises(ProbeIOError) as exc_info:
            FileSizeProbe().measure("missing.js", output_dir)
        assert exc_info.value.artifact == "missing.js"

    def test_directory_is_not_an_artifact(self, output_dir):
        with pytest.raises(ProbeIOError):
            FileSizeProbe().measure("css", output_dir)

    def test_shell_metacharacters_are_plain_names(self, output_dir):
        with pytest.raises(ProbeIOError):
            FileSizeProbe().measure("x; rm -rf /", output_dir)

    def test_parent_traversal_rejected(self, output_dir):
        (output_dir.parent / "secret.txt").write_bytes(b"x" * 10)
        with pytest.raises(ProbeIOError) as exc_info:
            FileSizeProbe().measure("../secret.txt", output_dir)
        assert "outside output directory" in exc_info.value.reason

    def test_absolute_name_rejected(self, output_dir):
        outside = output_dir.parent / "outside.js"
        outside.write_bytes(b"x")
        with pytest.raises(ProbeIOError):
            FileSizeProbe().measure(str(outside), output_dir)

    def test_inner_dotdot_stays_inside(self, output_dir):
        assert FileSizeProbe().measure("css/../main.js", output_dir) == 2048


class TestStaticSizeProbe:

    def test_known_and_unknown(self):
        probe = StaticSizeProbe({"a.js": 7})
        assert probe.measure("a.js", "dist") == 7
        with pytest.raises(ProbeIOError):
            probe.measure("b.js", "dist")


class TestDiscoverArtifacts:

    def test_lists_relative_posix_paths_sorted(self, output_dir):
        assert discover_artifacts(output_dir) == [
            "css/app.css",
            "main.js",
            "main.js.map",
            "vendor.abc123.js",
        ]

    def test_missing_directory(self, tmp_path):
        with pytest.raises(SizeGuardError):
            discover_artifacts(tmp_path / "nope")
