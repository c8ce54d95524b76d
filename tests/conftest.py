"""Shared fixtures for the mod updater tests."""

import logging
import sys
from pathlib import Path
from typing import Dict, List
from unittest.mock import Mock

import pytest

# Add src to Python path
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from mod_updater.config.settings import UpdaterConfig
from mod_updater.exceptions import RemoteError
from mod_updater.sync.observer import SyncObserver


class FakeManifestClient:
    """In-memory stand-in for ManifestClient."""

    def __init__(self, files: Dict[str, bytes], manifest: List[str] = None):
        self.files = files
        self.manifest = list(files) if manifest is None else manifest
        self.fetched: List[str] = []
        self.manifest_error = None

    def fetch_manifest(self) -> List[str]:
        if self.manifest_error:
            raise self.manifest_error
        return list(self.manifest)

    def fetch_content(self, name: str) -> bytes:
        self.fetched.append(name)
        if name not in self.files:
            raise RemoteError(404, f"Failed to download {name}: Not Found")
        return self.files[name]


class RecordingObserver(SyncObserver):
    """Keeps every notification for later assertions."""

    def __init__(self):
        self.statuses = []
        self.progress = []
        self.completed = []
        self.errors = []

    def on_status(self, message):
        self.statuses.append(message)

    def on_progress(self, progress):
        self.progress.append(progress)

    def on_complete(self, success):
        self.completed.append(success)

    def on_error(self, message):
        self.errors.append(message)


def make_response(status_code=200, reason="OK", json_data=None, content=b""):
    """Build a mock of requests.Response."""
    response = Mock()
    response.status_code = status_code
    response.reason = reason
    response.ok = status_code < 400
    response.content = content
    if isinstance(json_data, Exception):
        response.json.side_effect = json_data
    else:
        response.json.return_value = json_data
    return response


def write_mods(directory: Path, names, content=None):
    """Create mod files; each file's content defaults to its own name."""
    directory.mkdir(parents=True, exist_ok=True)
    for name in names:
        data = content if content is not None else name.encode()
        (directory / name).write_bytes(data)


def file_names(directory: Path):
    return {p.name for p in directory.iterdir() if p.is_file()}


@pytest.fixture(autouse=True)
def reset_package_logger():
    yield
    logger = logging.getLogger("mod_updater")
    logger.handlers.clear()
    logger.setLevel(logging.NOTSET)


@pytest.fixture
def mods_dir(tmp_path):
    path = tmp_path / "instance" / "minecraft" / "mods"
    path.mkdir(parents=True)
    return path


@pytest.fixture
def config(tmp_path):
    return UpdaterConfig(
        base_url="https://mods.example.com",
        backup_root=tmp_path / "backups",
    )


@pytest.fixture
def observer():
    return RecordingObserver()
