"""
AxolotlSMP Mod Updater

Keeps a local Minecraft mods folder identical to the mod list published by
the server, taking a backup of the folder before every update.
"""

__version__ = "1.0.0"
__author__ = "AxolotlSMP"
__description__ = "Sync a local mods folder with the server's mod list"

from .config.settings import UpdaterConfig
from .exceptions import FilesystemError, NetworkError, RemoteError, SyncError
from .sync.orchestrator import SyncOrchestrator, SyncResult, run_sync

__all__ = [
    "UpdaterConfig",
    "SyncOrchestrator",
    "SyncResult",
    "run_sync",
    "SyncError",
    "RemoteError",
    "NetworkError",
    "FilesystemError",
]
