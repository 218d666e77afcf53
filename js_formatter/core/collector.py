"""
File Collector Module

Turns command-line paths into a stream of SourceFile objects.
"""

import os
from pathlib import Path
from typing import Iterable, Iterator
import logging

from .source_file import SourceFile

logger = logging.getLogger(__name__)

SKIPPED_DIRS = {'node_modules', 'bower_components'}


def _is_skipped(path: Path, root: Path) -> bool:
    for part in path.relative_to(root).parts[:-1]:
        if part in SKIPPED_DIRS or part.startswith('.'):
            return True
    return False


def find_js_files(directory: str, recursive: bool = True) -> Iterator[Path]:
    """
    Find JavaScript files under a directory.

    Args:
        directory: Directory to search
        recursive: Whether to descend into subdirectories

    Returns:
        Sorted iterator of .js paths, dependency and hidden directories excluded
    """
    root = Path(directory)
    pattern = "**/*.js" if recursive else "*.js"
    for path in sorted(root.glob(pattern)):
        if path.is_file() and not _is_skipped(path, root):
            yield path


def collect_files(paths: Iterable[str], recursive: bool = True) -> Iterator[SourceFile]:
    """
    Yield SourceFile objects for files and directories.

    Explicit file paths are yielded whatever their extension; the formatter
    decides what it can handle.
    """
    for path in paths:
        if not os.path.exists(path):
            logger.error(f"Path not found: {path}")
            continue

        if os.path.isfile(path):
            yield SourceFile.read(path)
            continue

        found = 0
        for js_path in find_js_files(path, recursive=recursive):
            found += 1
            yield SourceFile.read(str(js_path))
        logger.info(f"Found {found} JavaScript files in {path}")
