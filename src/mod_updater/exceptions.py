"""Exceptions raised while updating a mods directory."""

from pathlib import Path
from typing import TYPE_CHECKING, List, Optional, Union

if TYPE_CHECKING:
    from .discovery.prism import InstanceInfo


class SyncError(Exception):
    """Base class for every failure a sync can report."""
    pass


class RemoteError(SyncError):
    """Raised when the mod server answers with a non-success status."""

    def __init__(self, status_code: int, reason: str, url: Optional[str] = None):
        message = f"Server returned {status_code}: {reason}"
        if url:
            message = f"{message} ({url})"
        super().__init__(message)
        self.status_code = status_code
        self.reason = reason
        self.url = url


class NetworkError(SyncError):
    """Raised when the mod server cannot be reached at all."""

    def __init__(self, message: str, url: Optional[str] = None):
        super().__init__(message)
        self.url = url


class FilesystemError(SyncError):
    """Raised when reading, copying, deleting or writing a local file fails."""

    def __init__(self, message: str, path: Optional[Union[str, Path]] = None):
        super().__init__(message)
        self.path = Path(path) if path is not None else None


class DiscoveryError(SyncError):
    """Raised when no mods directory can be located automatically."""
    pass


class MultipleInstancesError(DiscoveryError):
    """Raised when several launcher instances match and the caller must choose."""

    def __init__(self, instances: List["InstanceInfo"]):
        names = ", ".join(instance.name for instance in instances)
        super().__init__(f"Multiple matching instances found: {names}")
        self.instances = instances


class ConfigError(Exception):
    """Raised when a configuration file cannot be loaded."""
    pass
