"""Data models for name-status diff parsing."""

from __future__ import annotations

from dataclasses import dataclass
from typing import FrozenSet


@dataclass(frozen=True, slots=True)
class DiffEntry:
    """A single parsed line from ``git diff --name-status``."""

    status: str  # single status letter, '' when the line carried none
    path: str


ChangedFileSet = FrozenSet[str]
