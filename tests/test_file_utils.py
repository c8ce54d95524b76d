"""Tests for file helpers and error types."""

import pytest

from mod_updater.exceptions import FilesystemError, RemoteError
from mod_updater.utils.file_utils import FileHelper


def test_list_files_ignores_directories(tmp_path):
    (tmp_path / "b.jar").write_bytes(b"")
    (tmp_path / "a.jar").write_bytes(b"")
    (tmp_path / "config").mkdir()

    assert FileHelper.list_files(tmp_path) == ["a.jar", "b.jar"]


def test_list_files_missing_directory(tmp_path):
    assert FileHelper.list_files(tmp_path / "missing") == []


@pytest.mark.parametrize("name, expected", [
    ("sodium-fabric-0.5.3.jar", True),
    ("my mod (1).jar", True),
    (".hidden.jar", True),
    ("", False),
    (".", False),
    ("..", False),
    ("a/b.jar", False),
    ("a\\b.jar", False),
    ("bad\x00.jar", False),
    ("C:evil.jar", False),
    ("a.jar:stream", False),
    ("what?.jar", False),
    ("a<b>.jar", False),
    ("pipe|name.jar", False),
])
def test_is_plain_filename(name, expected):
    assert FileHelper.is_plain_filename(name) is expected


@pytest.mark.parametrize("size, expected", [
    (0, "0 B"),
    (512, "512.0 B"),
    (2048, "2.0 KB"),
    (5 * 1024 * 1024, "5.0 MB"),
])
def test_format_file_size(size, expected):
    assert FileHelper.format_file_size(size) == expected


def test_remote_error_message():
    error = RemoteError(500, "Internal Server Error", url="https://x/api/mods")

    assert str(error) == "Server returned 500: Internal Server Error (https://x/api/mods)"
    assert error.status_code == 500


def test_filesystem_error_keeps_path(tmp_path):
    error = FilesystemError("boom", path=str(tmp_path))

    assert error.path == tmp_path
