"""Changelog enforcement — context, path resolution, and the check."""

from changelog_enforcer.enforcer.check import DiffRunner, enforce, run
from changelog_enforcer.enforcer.context import EventError, PullRequestContext, load_event
from changelog_enforcer.enforcer.errors import (
    EnforcementError,
    InvocationError,
    MissingChangelogError,
)
from changelog_enforcer.enforcer.resolver import DEFAULT_CHANGELOG, resolve_changelog_path

__all__ = [
    "DEFAULT_CHANGELOG",
    "DiffRunner",
    "EnforcementError",
    "EventError",
    "InvocationError",
    "MissingChangelogError",
    "PullRequestContext",
    "enforce",
    "load_event",
    "resolve_changelog_path",
    "run",
]
