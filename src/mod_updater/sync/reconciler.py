"""Bring a mods directory in line with the server's mod list."""

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import List, Optional, Sequence

from ..exceptions import FilesystemError
from ..utils.file_utils import FileHelper
from .observer import SyncObserver, SyncProgress

logger = logging.getLogger(__name__)


@dataclass
class SyncPlan:
    """Differences between a local directory and the remote mod list."""
    local: List[str]
    remote: List[str]
    to_remove: List[str]
    to_download: List[str]

    @property
    def is_up_to_date(self) -> bool:
        return not self.to_remove and not self.to_download


@dataclass
class ReconcileStats:
    """What a reconcile pass changed on disk."""
    removed: List[str] = field(default_factory=list)
    downloaded: List[str] = field(default_factory=list)
    bytes_transferred: int = 0


class Reconciler:
    """Removes mods the server no longer lists and downloads missing ones.

    Names are compared by exact string match only. A file that exists
    locally under a listed name is trusted as-is and never re-downloaded.
    """

    def __init__(self, client, observer: Optional[SyncObserver] = None):
        """Initialize reconciler.

        Args:
            client: Object with a ``fetch_content(name) -> bytes`` method
            observer: Receives a progress event for every remote entry
        """
        self.client = client
        self.observer = observer or SyncObserver()

    @staticmethod
    def list_local(local_dir: Path) -> List[str]:
        """List mod files in ``local_dir``; empty if it does not exist."""
        try:
            return FileHelper.list_files(local_dir)
        except OSError as e:
            raise FilesystemError(f"Could not read mods directory {local_dir}: {e}", path=local_dir) from e

    def plan(self, local_dir: Path, remote: Sequence[str]) -> SyncPlan:
        """Compute removals and downloads without touching the filesystem."""
        local = self.list_local(Path(local_dir))
        remote = list(remote)
        local_names = set(local)
        remote_names = set(remote)

        to_download: List[str] = []
        for name in remote:
            if name not in local_names and name not in to_download:
                to_download.append(name)

        return SyncPlan(
            local=local,
            remote=remote,
            to_remove=[name for name in local if name not in remote_names],
            to_download=to_download,
        )

    def reconcile(self, local_dir: Path, remote: Sequence[str]) -> ReconcileStats:
        """Make the file names in ``local_dir`` equal the ``remote`` list.

        The first failure aborts the pass and leaves the directory as it is
        at that point.

        Args:
            local_dir: Mods directory, already backed up
            remote: Authoritative mod names in manifest order

        Returns:
            Names removed and downloaded, and the number of bytes written

        Raises:
            FilesystemError: Listing, deleting or writing failed
            RemoteError: The server refused a download
            NetworkError: The server could not be reached
        """
        local_dir = Path(local_dir)
        logger.info("Scanning directory for differences...")
        plan = self.plan(local_dir, remote)
        logger.debug(f"Local mods: {', '.join(plan.local)}")
        logger.debug(f"Server mods: {', '.join(plan.remote)}")

        stats = ReconcileStats()

        for name in plan.to_remove:
            path = local_dir / name
            try:
                path.unlink()
            except OSError as e:
                raise FilesystemError(f"Failed to remove {name}: {e}", path=path) from e
            stats.removed.append(name)
            logger.info(f"Removed outdated mod: {name}")

        pending = set(plan.to_download)
        total = len(plan.remote)
        for index, name in enumerate(plan.remote, start=1):
            self.observer.on_progress(SyncProgress(current=index, total=total, mod_name=name))
            if name not in pending:
                continue

            logger.info(f"Downloading {name}...")
            content = self.client.fetch_content(name)
            self._write(local_dir, name, content)
            pending.discard(name)
            stats.downloaded.append(name)
            stats.bytes_transferred += len(content)
            logger.info(f"Downloaded {name} ({FileHelper.format_file_size(len(content))})")

        return stats

    @staticmethod
    def _write(local_dir: Path, name: str, content: bytes) -> None:
        path = local_dir / name
        try:
            local_dir.mkdir(parents=True, exist_ok=True)
            path.write_bytes(content)
        except OSError as e:
            raise FilesystemError(f"Failed to write {name}: {e}", path=path) from e
