"""
Artifact Size Probes.

A probe answers one question: how many bytes does this emitted artifact
occupy in the output directory? The engine only depends on the SizeProbe
protocol, so hosts can plug in whatever they already know about sizes.
"""

import os
from pathlib import Path
from typing import Dict, Protocol, Union

from sizeguard.exceptions import ProbeIOError


class SizeProbe(Protocol):
    def measure(self, artifact_name: str, output_dir: Union[str, Path]) -> int:
        ...


class FileSizeProbe:
    """Measure artifacts with a filesystem stat, confined to the output directory."""

    def measure(self, artifact_name: str, output_dir: Union[str, Path]) -> int:
        root = Path(os.path.abspath(output_dir))
        path = Path(os.path.normpath(root / artifact_name))
        if path == root or root not in path.parents:
            raise ProbeIOError(artifact_name, f"resolves outside output directory {root}")

        try:
            stat = path.stat()
        except FileNotFoundError:
            raise ProbeIOError(artifact_name, f"no such file {path}") from None
        except OSError as e:
            raise ProbeIOError(artifact_name, str(e)) from e

        if not path.is_file():
            raise ProbeIOError(artifact_name, f"{path} is not a regular file")
        return stat.st_size


class StaticSizeProbe:
    """Serve sizes from a precomputed mapping of artifact name to bytes."""

    def __init__(self, sizes: Dict[str, int]):
        self.sizes = dict(sizes)

    def measure(self, artifact_name: str, output_dir: Union[str, Path]) -> int:
        if artifact_name not in self.sizes:
            raise ProbeIOError(artifact_name, "size not known")
        return self.sizes[artifact_name]
