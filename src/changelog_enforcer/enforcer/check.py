"""The changelog check.

``enforce`` logs its two inputs, then either skips (skip label present) or
diffs the branch against ``origin/<base>`` and requires the changelog path to
be among the added/modified files. ``run`` is the single failure boundary:
every exception becomes one ``set_failed`` call on the reporter.
"""

from __future__ import annotations

from typing import Awaitable, Callable, Optional

from changelog_enforcer.enforcer.context import PullRequestContext
from changelog_enforcer.enforcer.errors import InvocationError, MissingChangelogError
from changelog_enforcer.enforcer.resolver import resolve_changelog_path
from changelog_enforcer.git.adapter import GitError
from changelog_enforcer.git.diff_parser import parse_changed_files
from changelog_enforcer.output.actions import Reporter

DiffRunner = Callable[[str], Awaitable[str]]


async def enforce(
    context: PullRequestContext,
    skip_label: str,
    changelog_path: str,
    *,
    reporter: Reporter,
    run_diff: DiffRunner,
) -> None:
    """Raise EnforcementError unless the pull request is skipped or touches *changelog_path*."""
    reporter.info(f"Skip Label: {skip_label}")
    reporter.info(f"Changelog Path: {changelog_path}")

    if skip_label in context.labels:
        return

    try:
        diff_text = await run_diff(context.base_ref)
    except GitError as exc:
        raise InvocationError(str(exc)) from exc

    if changelog_path not in parse_changed_files(diff_text):
        raise MissingChangelogError(changelog_path)


async def run(
    context: PullRequestContext,
    skip_label: str,
    changelog_path_override: Optional[str],
    *,
    reporter: Reporter,
    run_diff: DiffRunner,
) -> bool:
    """Resolve the changelog path and enforce it. Returns True on pass or skip."""
    try:
        changelog_path = resolve_changelog_path(context.base_ref, changelog_path_override)
        await enforce(
            context,
            skip_label,
            changelog_path,
            reporter=reporter,
            run_diff=run_diff,
        )
    except Exception as exc:
        reporter.set_failed(str(exc))
        return False
    return True
