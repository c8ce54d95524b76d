"""Entry point that backs up a mods directory and then syncs it."""

import logging
import time
from dataclasses import dataclass, field
from pathlib import Path
from typing import Callable, List, Optional, Union

from ..config.settings import UpdaterConfig
from ..exceptions import DiscoveryError, FilesystemError, SyncError
from ..sources.manifest_client import ManifestClient
from ..utils.logging import TimedOperation
from .backup_manager import BackupManager
from .observer import GuardedObserver, LoggingObserver, SyncObserver
from .reconciler import Reconciler

logger = logging.getLogger(__name__)

PathResolver = Callable[[], Path]


@dataclass
class SyncResult:
    """Outcome of one ``run_sync`` call."""
    target_path: Optional[Path] = None
    status: str = "pending"
    error: Optional[SyncError] = None
    backup_path: Optional[Path] = None
    removed: List[str] = field(default_factory=list)
    downloaded: List[str] = field(default_factory=list)
    bytes_transferred: int = 0
    duration: float = 0.0

    @property
    def success(self) -> bool:
        return self.status == "completed"


class SyncOrchestrator:
    """Runs backup and reconciliation in sequence for one mods directory.

    At most one sync may run against a given directory at a time; this is
    not enforced. There is no retry and no automatic restore from the
    backup when reconciliation fails.
    """

    def __init__(
        self,
        client: ManifestClient,
        backup_manager: BackupManager,
        observer: Optional[SyncObserver] = None,
        path_resolver: Optional[PathResolver] = None,
    ):
        """Initialize orchestrator.

        Args:
            client: Source of the mod list and mod files
            backup_manager: Takes the pre-sync snapshot
            observer: Receives status, progress, completion and error events
            path_resolver: Supplies the mods directory when none is passed
        """
        self.client = client
        self.backup_manager = backup_manager
        self.observer = GuardedObserver(observer or LoggingObserver())
        self.path_resolver = path_resolver

    @classmethod
    def from_config(
        cls,
        config: UpdaterConfig,
        observer: Optional[SyncObserver] = None,
        path_resolver: Optional[PathResolver] = None,
    ) -> "SyncOrchestrator":
        return cls(
            client=ManifestClient(config),
            backup_manager=BackupManager.from_config(config),
            observer=observer,
            path_resolver=path_resolver,
        )

    def _resolve_path(self, target_path: Optional[Union[str, Path]]) -> Path:
        if target_path:
            return Path(target_path).expanduser()
        if self.path_resolver is None:
            raise DiscoveryError("No mods directory given and no way to discover one")
        return Path(self.path_resolver())

    def run_sync(self, target_path: Optional[Union[str, Path]] = None) -> SyncResult:
        """Back up and then sync a mods directory with the server.

        Failures are not raised. The first error is reported to the observer
        and returned on the result, and the filesystem is left as the failing
        step left it.

        Args:
            target_path: Mods directory; discovered when omitted

        Returns:
            Result describing what happened
        """
        result = SyncResult()
        start_time = time.monotonic()
        logger.info("Starting update process")

        try:
            result.target_path = self._resolve_path(target_path)

            self.observer.on_status("Backing up mods...")
            with TimedOperation(logger, "backup"):
                result.backup_path = self.backup_manager.backup(result.target_path)

            self.observer.on_status("Syncing mods...")
            with TimedOperation(logger, "sync"):
                remote = self.client.fetch_manifest()
                reconciler = Reconciler(self.client, self.observer)
                stats = reconciler.reconcile(result.target_path, remote)

            result.removed = stats.removed
            result.downloaded = stats.downloaded
            result.bytes_transferred = stats.bytes_transferred
            result.status = "completed"
        except SyncError as e:
            result.status = "failed"
            result.error = e
        except OSError as e:
            result.status = "failed"
            result.error = FilesystemError(str(e), path=e.filename)
            result.error.__cause__ = e

        result.duration = time.monotonic() - start_time

        if result.success:
            self.observer.on_complete(True)
            self.observer.on_status("Update completed successfully!")
        else:
            logger.error(f"Update failed: {result.error}")
            self.observer.on_error(str(result.error))

        return result


def run_sync(
    target_path: Optional[Union[str, Path]] = None,
    config: Optional[UpdaterConfig] = None,
    observer: Optional[SyncObserver] = None,
    path_resolver: Optional[PathResolver] = None,
) -> SyncResult:
    """Sync a mods directory using the given or default configuration."""
    config = config or UpdaterConfig()
    orchestrator = SyncOrchestrator.from_config(config, observer=observer, path_resolver=path_resolver)
    return orchestrator.run_sync(target_path)
