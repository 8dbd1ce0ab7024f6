"""Shared test fixtures — sample diffs, event payloads, fakes, temp git repos."""

from __future__ import annotations

import json
import subprocess
from pathlib import Path
from typing import Callable, List, Optional

import pytest

from changelog_enforcer.git.adapter import GitError
from changelog_enforcer.output.actions import Reporter


class RecordingReporter(Reporter):
    """Reporter that records calls instead of printing."""

    def __init__(self) -> None:
        super().__init__(annotations=False)
        self.infos: List[str] = []
        self.failures: List[str] = []

    def info(self, message: str) -> None:
        self.infos.append(message)

    def set_failed(self, message: str) -> None:
        self.failed = True
        self.failure_message = message
        self.failures.append(message)


class FakeDiff:
    """Stands in for the git diff call; records the base refs it was asked for."""

    def __init__(self, output: str = "", error: Optional[Exception] = None) -> None:
        self.output = output
        self.error = error
        self.calls: List[str] = []

    async def __call__(self, base_ref: str) -> str:
        self.calls.append(base_ref)
        if self.error is not None:
            raise self.error
        return self.output


@pytest.fixture
def reporter() -> RecordingReporter:
    return RecordingReporter()


@pytest.fixture
def fake_diff() -> Callable[..., FakeDiff]:
    def _make(output: str = "", error: Optional[Exception] = None) -> FakeDiff:
        return FakeDiff(output, error)

    return _make


@pytest.fixture
def git_error() -> GitError:
    return GitError("git diff origin/master --name-status --diff-filter=AM failed with exit code 128")


@pytest.fixture
def diff_without_changelog() -> str:
    return "M       .env.js\nA       an_added_changed_file.js"


@pytest.fixture
def diff_with_changelog() -> str:
    return "M       .env.js\nM       CHANGELOG.md"


def _pull_request_event(base_ref: str, labels: List[str]) -> dict:
    return {
        "action": "opened",
        "number": 1,
        "pull_request": {
            "number": 1,
            "title": "Update the thing",
            "base": {"ref": base_ref, "sha": "a" * 40},
            "head": {"ref": "feature/thing", "sha": "b" * 40},
            "labels": [{"id": i, "name": name} for i, name in enumerate(labels)],
        },
    }


@pytest.fixture
def make_event(tmp_path: Path) -> Callable[..., Path]:
    """Write a pull_request event payload and return its path."""

    def _make(base_ref: str = "master", labels: Optional[List[str]] = None) -> Path:
        path = tmp_path / f"event-{base_ref.replace('/', '_')}.json"
        path.write_text(json.dumps(_pull_request_event(base_ref, labels or [])), encoding="utf-8")
        return path

    return _make


def _git(repo: Path, *args: str) -> None:
    subprocess.run(["git", *args], cwd=repo, capture_output=True, check=True)


@pytest.fixture
def tmp_git_repo(tmp_path: Path) -> Path:
    """A git repo whose initial commit is also ``origin/master``."""
    repo = tmp_path / "repo"
    repo.mkdir()
    _git(repo, "init")
    _git(repo, "config", "user.email", "test@test.com")
    _git(repo, "config", "user.name", "Test")
    (repo / "README.md").write_text("# Test\n")
    (repo / "CHANGELOG.md").write_text("# Changelog\n")
    _git(repo, "add", ".")
    _git(repo, "commit", "-m", "init")
    _git(repo, "update-ref", "refs/remotes/origin/master", "HEAD")
    return repo


@pytest.fixture
def commit_files() -> Callable[..., None]:
    """Write and commit files in a repo."""

    def _commit(repo: Path, files: dict) -> None:
        for name, content in files.items():
            path = repo / name
            path.parent.mkdir(parents=True, exist_ok=True)
            path.write_text(content)
        _git(repo, "add", ".")
        _git(repo, "commit", "-m", "change")

    return _commit
