"""Enforcement failures."""

from __future__ import annotations


class EnforcementError(Exception):
    """Raised when the changelog check fails for any reason."""


class MissingChangelogError(EnforcementError):
    """The diff ran but the required changelog path was not in it."""

    def __init__(self, changelog_path: str) -> None:
        self.changelog_path = changelog_path
        super().__init__(f"No update to {changelog_path} found!")


class InvocationError(EnforcementError):
    """The git diff invocation itself failed."""
