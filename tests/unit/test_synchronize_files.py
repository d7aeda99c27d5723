"""Unit tests for copying the resume into the project."""

import os
from pathlib import Path

import pytest

from resume_sync.synchronize.exceptions import CopyFailureError, MissingSourceError
from resume_sync.synchronize.files import ensure_source_exists, sync_file


def test_sync_file_creates_parent_directories(source_file: Path, tmp_path: Path) -> None:
    """Test that missing parent directories of the destination are created."""
    dest = tmp_path / "site" / "public" / "docs" / "resume.pdf"

    sync_file(source_file, dest)

    assert dest.read_bytes() == source_file.read_bytes()


def test_sync_file_preserves_binary_content(tmp_path: Path) -> None:
    """Test that every byte value, including CR/LF and NUL, is copied exactly."""
    source = tmp_path / "resume.pdf"
    payload = bytes(range(256)) + b"\r\n\x00\r" + bytes(reversed(range(256)))
    source.write_bytes(payload)
    dest = tmp_path / "out" / "resume.pdf"

    sync_file(source, dest)

    assert dest.read_bytes() == payload


def test_sync_file_overwrites_existing_destination(source_file: Path, tmp_path: Path) -> None:
    """Test that an existing destination is replaced and no temporary file is left behind."""
    dest = tmp_path / "public" / "resume.pdf"
    dest.parent.mkdir()
    dest.write_bytes(b"stale content that is longer than nothing")

    sync_file(source_file, dest)

    assert dest.read_bytes() == source_file.read_bytes()
    assert sorted(p.name for p in dest.parent.iterdir()) == ["resume.pdf"]


def test_sync_file_missing_source_raises(tmp_path: Path) -> None:
    """Test that a missing source raises MissingSourceError."""
    with pytest.raises(MissingSourceError) as exc_info:
        sync_file(tmp_path / "missing.pdf", tmp_path / "dest.pdf")
    assert "Source file not found" in str(exc_info.value)


def test_sync_file_uncreatable_parent_raises(source_file: Path, tmp_path: Path) -> None:
    """Test that a destination parent that cannot be created raises CopyFailureError."""
    blocker = tmp_path / "public"
    blocker.write_text("a file, not a directory")

    with pytest.raises(CopyFailureError):
        sync_file(source_file, blocker / "resume.pdf")


def test_ensure_source_exists_rejects_directories(tmp_path: Path) -> None:
    """Test that a directory is not accepted as the source file."""
    with pytest.raises(MissingSourceError):
        ensure_source_exists(tmp_path)


def test_sync_file_cleanup_failure_keeps_copy_failure_error(source_file: Path, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    """Test that a temp file that cannot be removed does not mask the copy failure."""

    def fail(*args: object, **kwargs: object) -> None:
        raise PermissionError("denied")

    monkeypatch.setattr(os, "replace", fail)
    monkeypatch.setattr(Path, "unlink", fail)

    with pytest.raises(CopyFailureError) as exc_info:
        sync_file(source_file, tmp_path / "public" / "resume.pdf")

    assert "denied" in str(exc_info.value)
