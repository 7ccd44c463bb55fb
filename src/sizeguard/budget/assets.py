"""
Output directory discovery.

Stands in for the bundler's emitted-asset set when sizeguard runs outside
a build pipeline: every regular file below the output directory, named by
its POSIX path relative to that directory.
"""

from pathlib import Path
from typing import List, Union

from loguru import logger

from sizeguard.exceptions import SizeGuardError


def discover_artifacts(output_dir: Union[str, Path]) -> List[str]:
    """
    List emitted artifacts under output_dir.

    Args:
        output_dir: Build output directory

    Returns:
        Sorted relative POSIX paths of all regular files

    Raises:
        SizeGuardError: If output_dir is not a directory
    """
    root = Path(output_dir)
    if not root.is_dir():
        raise SizeGuardError(f"Output directory not found: {root}")

    names = sorted(
        path.relative_to(root).as_posix()
        for path in root.rglob("*")
        if path.is_file()
    )
    logger.debug(f"Discovered {len(names)} artifact(s) in {root}")
    return names
