"""Pytest configuration for integration tests."""

import shutil
from pathlib import Path
from typing import Generator

import pytest
import structlog

from resume_sync.utils.logging import reset_logging
from tests.integration.utils import git


@pytest.fixture(autouse=True)
def require_git() -> None:
    """Skip integration tests when git is not installed."""
    if shutil.which("git") is None:
        pytest.skip("git is not installed")


@pytest.fixture(autouse=True)
def git_identity(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    """Give git a deterministic identity and ignore the developer's global config."""
    monkeypatch.setenv("GIT_AUTHOR_NAME", "Resume Sync Tests")
    monkeypatch.setenv("GIT_AUTHOR_EMAIL", "tests@example.com")
    monkeypatch.setenv("GIT_COMMITTER_NAME", "Resume Sync Tests")
    monkeypatch.setenv("GIT_COMMITTER_EMAIL", "tests@example.com")
    monkeypatch.setenv("GIT_CONFIG_GLOBAL", str(tmp_path / "gitconfig"))
    monkeypatch.setenv("GIT_CONFIG_NOSYSTEM", "1")


@pytest.fixture(autouse=True)
def reset_structlog() -> Generator[None, None, None]:
    """Restore logging after each test."""
    yield
    reset_logging()
    structlog.reset_defaults()


@pytest.fixture
def remote_repo(tmp_path: Path) -> Path:
    """A bare repository standing in for the hosting remote."""
    remote = tmp_path / "remote.git"
    remote.mkdir()
    git("init", "--bare", cwd=remote)
    return remote


@pytest.fixture
def project_repo(tmp_path: Path, remote_repo: Path) -> Path:
    """A web project checked out on main, tracking the bare remote."""
    project = tmp_path / "site"
    project.mkdir()
    git("init", cwd=project)
    git("symbolic-ref", "HEAD", "refs/heads/main", cwd=project)
    (project / "index.html").write_text("<h1>Hello</h1>\n")
    git("add", "index.html", cwd=project)
    git("commit", "-m", "Initial commit", cwd=project)
    git("remote", "add", "origin", str(remote_repo), cwd=project)
    git("push", "origin", "main", cwd=project)
    return project
