"""Snapshot of the mods directory taken before it is modified."""

import logging
import os
import shutil
from pathlib import Path

from ..exceptions import FilesystemError

# Module logger
logger = logging.getLogger(__name__)


class BackupManager:
    """Copies a mods directory to a fixed backup location.

    There is a single snapshot slot. Each backup deletes the previous one
    before copying, so the snapshot always reflects the latest run only.
    Restoring is left to the user.
    """

    def __init__(self, backup_root: Path, backup_name: str = "mods_backup"):
        """Initialize backup manager.

        Args:
            backup_root: Directory holding the snapshot, created on demand
            backup_name: Name of the snapshot directory inside the root
        """
        self.backup_root = Path(backup_root)
        self.backup_name = backup_name

    @classmethod
    def from_config(cls, config) -> "BackupManager":
        return cls(config.backup_root, config.backup_name)

    @property
    def backup_path(self) -> Path:
        return self.backup_root / self.backup_name

    def backup(self, source_dir: Path) -> Path:
        """Replace the snapshot with a flat copy of ``source_dir``.

        Only regular files are copied. Subdirectories are skipped. If a copy
        fails partway the snapshot is left incomplete.

        Args:
            source_dir: Mods directory to snapshot

        Returns:
            Path of the fresh snapshot

        Raises:
            FilesystemError: The source is missing or unreadable, or a copy failed
        """
        source_dir = Path(source_dir)
        if not source_dir.is_dir():
            raise FilesystemError(f"Mods directory not found: {source_dir}", path=source_dir)

        target = self.backup_path
        try:
            self.backup_root.mkdir(parents=True, exist_ok=True)
            if target.exists():
                logger.debug(f"Removing previous backup at {target}")
                shutil.rmtree(target)
            target.mkdir()
        except OSError as e:
            raise FilesystemError(f"Could not prepare backup directory {target}: {e}", path=target) from e

        logger.info(f"Backing up current mods to {target}")

        try:
            with os.scandir(source_dir) as it:
                entries = list(it)
        except OSError as e:
            raise FilesystemError(f"Could not read mods directory {source_dir}: {e}", path=source_dir) from e

        copied = 0
        for entry in entries:
            if not entry.is_file():
                logger.debug(f"Skipping non-file entry: {entry.name}")
                continue
            try:
                shutil.copyfile(entry.path, target / entry.name)
            except OSError as e:
                raise FilesystemError(f"Failed to back up {entry.name}: {e}", path=entry.path) from e
            copied += 1

        logger.info(f"Backed up {copied} files")
        return target
