"""Sync engine: backup, diff and reconciliation."""

from .backup_manager import BackupManager
from .observer import CompositeObserver, LoggingObserver, SyncObserver, SyncProgress
from .orchestrator import SyncOrchestrator, SyncResult, run_sync
from .reconciler import ReconcileStats, Reconciler, SyncPlan

__all__ = [
    "BackupManager",
    "CompositeObserver",
    "LoggingObserver",
    "ReconcileStats",
    "Reconciler",
    "SyncObserver",
    "SyncOrchestrator",
    "SyncPlan",
    "SyncProgress",
    "SyncResult",
    "run_sync",
]
