"""Utility functions and helpers."""

from .file_utils import FileHelper
from .logging import TimedOperation, setup_logging

__all__ = ["setup_logging", "TimedOperation", "FileHelper"]
