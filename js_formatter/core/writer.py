"""
File Writer Module

Writes formatted files back to disk, keeping timestamped backups so a run
can be undone file by file.
"""

import datetime
import hashlib
import os
import shutil
from pathlib import Path
from typing import Optional
import logging

from .source_file import SourceFile

logger = logging.getLogger(__name__)


class FileWriter:
    """Persists SourceFile contents with optional backups."""

    def __init__(self, backup_enabled: bool = True, backup_dir: str = ".js_formatter_backups"):
        """
        Initialize the writer.

        Args:
            backup_enabled: Whether to back up files before overwriting them
            backup_dir: Directory where backups are stored
        """
        self.backup_enabled = backup_enabled
        self.backup_dir = backup_dir

    def _backup_name(self, filepath: str) -> str:
        # the resolved path keeps same-named files under different roots apart
        digest = hashlib.sha1(str(Path(filepath).resolve()).encode("utf-8")).hexdigest()[:12]
        return f"{Path(filepath).name}.{digest}"

    def create_backup(self, filepath: str) -> Optional[Path]:
        """Copy a file into the backup directory."""
        if not self.backup_enabled or not os.path.exists(filepath):
            return None

        backup_path = Path(self.backup_dir)
        backup_path.mkdir(parents=True, exist_ok=True)

        timestamp = datetime.datetime.now().strftime("%Y%m%d_%H%M%S_%f")
        backup_filepath = backup_path / f"{self._backup_name(filepath)}.{timestamp}.backup"
        shutil.copy2(filepath, backup_filepath)

        logger.info(f"Created backup: {backup_filepath}")
        return backup_filepath

    def write(self, file: SourceFile, output_dir: Optional[str] = None, base_dir: Optional[str] = None) -> str:
        """
        Write a file's contents.

        Args:
            file: File to write
            output_dir: Write under this directory instead of in place
            base_dir: Directory the file path is relative to when mirroring

        Returns:
            Path that was written
        """
        if file.is_null():
            raise ValueError(f"Cannot write null file: {file.path}")

        if output_dir:
            relative = os.path.relpath(file.path, base_dir) if base_dir else os.path.basename(file.path)
            target = os.path.join(output_dir, relative)
            os.makedirs(os.path.dirname(target) or '.', exist_ok=True)
        else:
            target = file.path
            self.create_backup(target)

        with open(target, 'wb') as f:
            f.write(file.contents)

        logger.debug(f"Wrote {target}")
        return target

    def restore_from_backup(self, filepath: str) -> bool:
        """
        Restore a file from its most recent backup.

        Args:
            filepath: Path to the file to restore

        Returns:
            True if restoration was successful
        """
        backup_path = Path(self.backup_dir)
        if not backup_path.exists():
            logger.error("No backup directory found")
            return False

        backup_files = list(backup_path.glob(f"{self._backup_name(filepath)}.*.backup"))
        if not backup_files:
            logger.error(f"No backup found for {filepath}")
            return False

        # timestamps sort lexicographically
        most_recent = max(backup_files, key=lambda p: p.name)
        shutil.copy2(most_recent, filepath)

        logger.info(f"Restored {filepath} from backup {most_recent}")
        return True
