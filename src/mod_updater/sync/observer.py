"""Status reporting from a running sync to whoever is watching it."""

import logging
from dataclasses import dataclass
from typing import Iterable, List

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SyncProgress:
    """Position in the download pass. ``current`` is 1-based."""
    current: int
    total: int
    mod_name: str


class SyncObserver:
    """Receives one-way notifications from a sync.

    Every method is a no-op here; subclasses override what they need.
    Notifications are delivered inline and nothing waits on the result.
    """

    def on_status(self, message: str) -> None:
        pass

    def on_progress(self, progress: SyncProgress) -> None:
        pass

    def on_complete(self, success: bool) -> None:
        pass

    def on_error(self, message: str) -> None:
        pass


class LoggingObserver(SyncObserver):
    """Writes notifications to the package log.

    Errors are not repeated here; the orchestrator logs each failure once.
    """

    def __init__(self, log: logging.Logger = logger):
        self.log = log

    def on_status(self, message: str) -> None:
        self.log.info(message)

    def on_progress(self, progress: SyncProgress) -> None:
        self.log.debug(f"[{progress.current}/{progress.total}] {progress.mod_name}")

    def on_complete(self, success: bool) -> None:
        self.log.info("Update completed successfully" if success else "Update did not complete")


class CompositeObserver(SyncObserver):
    """Fans notifications out to several observers in order."""

    def __init__(self, observers: Iterable[SyncObserver]):
        self.observers: List[SyncObserver] = list(observers)

    def on_status(self, message: str) -> None:
        for observer in self.observers:
            observer.on_status(message)

    def on_progress(self, progress: SyncProgress) -> None:
        for observer in self.observers:
            observer.on_progress(progress)

    def on_complete(self, success: bool) -> None:
        for observer in self.observers:
            observer.on_complete(success)

    def on_error(self, message: str) -> None:
        for observer in self.observers:
            observer.on_error(message)


class GuardedObserver(SyncObserver):
    """Wraps an observer so that its failures never interrupt a sync."""

    def __init__(self, observer: SyncObserver):
        self.observer = observer

    def _deliver(self, method: str, *args) -> None:
        try:
            getattr(self.observer, method)(*args)
        except Exception as e:
            logger.warning(f"Observer {type(self.observer).__name__}.{method} failed: {e}")

    def on_status(self, message: str) -> None:
        self._deliver('on_status', message)

    def on_progress(self, progress: SyncProgress) -> None:
        self._deliver('on_progress', progress)

    def on_complete(self, success: bool) -> None:
        self._deliver('on_complete', success)

    def on_error(self, message: str) -> None:
        self._deliver('on_error', message)
