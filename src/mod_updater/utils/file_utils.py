"""File utility functions."""

import os
from pathlib import Path
from typing import List


class FileHelper:
    """Helper class for mods directory operations."""

    @staticmethod
    def list_files(directory: Path) -> List[str]:
        """List the names of regular files directly inside a directory.

        Subdirectories are ignored. Names are sorted so listings are stable
        across platforms.

        Args:
            directory: Directory to list

        Returns:
            Sorted file names, or an empty list if the directory does not exist

        Raises:
            OSError: If the directory exists but cannot be read
        """
        if not directory.exists():
            return []

        with os.scandir(directory) as entries:
            return sorted(entry.name for entry in entries if entry.is_file())

    @staticmethod
    def is_plain_filename(name: str) -> bool:
        """Check that a name refers to a single entry inside a directory.

        Args:
            name: Candidate file name

        Returns:
            True if the name has no path components of its own
        """
        if not name or name in ('.', '..'):
            return False

        # Characters not allowed in filenames on various systems. A colon
        # would switch drives or name an NTFS stream on Windows.
        invalid_chars = '<>:"/\\|?*'
        if any(char in name for char in invalid_chars):
            return False

        # Reject control characters (including NUL)
        return all(ord(char) >= 32 for char in name)

    @staticmethod
    def format_file_size(size_bytes: float) -> str:
        """Format file size in human readable format.

        Args:
            size_bytes: Size in bytes

        Returns:
            Formatted size string
        """
        if size_bytes == 0:
            return "0 B"

        size_names = ["B", "KB", "MB", "GB", "TB", "PB"]
        i = 0

        while size_bytes >= 1024 and i < len(size_names) - 1:
            size_bytes /= 1024.0
            i += 1

        return f"{size_bytes:.1f} {size_names[i]}"
