"""Git subprocess wrapper — repo root lookup and the base-branch diff."""

from __future__ import annotations

import asyncio
import subprocess
from pathlib import Path
from typing import Optional

DEFAULT_REMOTE = "origin"


class GitError(Exception):
    """Raised when git is unavailable or exits with an error."""


def _run_git(args: list[str], cwd: Path, timeout: int = 30) -> str:
    """Run a git command and return stdout. Raises GitError on failure."""
    try:
        result = subprocess.run(
            ["git", *args],
            cwd=cwd,
            capture_output=True,
            text=True,
            timeout=timeout,
            encoding="utf-8",
            errors="replace",
        )
    except FileNotFoundError:
        raise GitError("git is not installed or not on PATH")
    except subprocess.TimeoutExpired:
        raise GitError(f"git command timed out after {timeout}s: git {' '.join(args)}")

    if result.returncode != 0:
        raise GitError(f"git error: {result.stderr.strip()}")
    return result.stdout


async def _run_git_async(args: list[str], cwd: Path) -> str:
    """Run a git command to completion and return its full stdout."""
    try:
        proc = await asyncio.create_subprocess_exec(
            "git",
            *args,
            cwd=cwd,
            stdin=asyncio.subprocess.DEVNULL,
            stdout=asyncio.subprocess.PIPE,
            stderr=asyncio.subprocess.PIPE,
        )
    except FileNotFoundError as exc:
        raise GitError(f"cannot run git in {cwd}: {exc}") from exc

    # communicate() only returns once the process has exited
    stdout, stderr = await proc.communicate()
    if proc.returncode != 0:
        message = stderr.decode("utf-8", errors="replace").strip()
        raise GitError(
            f"git {' '.join(args)} failed with exit code {proc.returncode}"
            + (f": {message}" if message else "")
        )
    return stdout.decode("utf-8", errors="replace")


def get_repo_root(cwd: Optional[Path] = None) -> Path:
    """Return the root of the current git repository."""
    cwd = cwd or Path.cwd()
    out = _run_git(["rev-parse", "--show-toplevel"], cwd=cwd)
    return Path(out.strip())


def name_status_args(base_ref: str, remote: str = DEFAULT_REMOTE) -> list[str]:
    """Arguments for the added/modified name-status diff against *base_ref*."""
    return ["diff", f"{remote}/{base_ref}", "--name-status", "--diff-filter=AM"]


async def get_name_status_diff(repo_root: Path, base_ref: str) -> str:
    """Return ``git diff origin/<base_ref> --name-status --diff-filter=AM``."""
    return await _run_git_async(name_status_args(base_ref), cwd=repo_root)
