"""Changelog path resolution for the release/hotfix branch convention.

- ``release/x.y.z`` or ``hotfix/x.y.z`` -> ``changelogs/x.y.md``
- anything else -> ``CHANGELOG.md``

The version segment is not validated: ``release/2`` resolves to
``changelogs/2.md``.
"""

from __future__ import annotations

from typing import Optional

DEFAULT_CHANGELOG = "CHANGELOG.md"
VERSIONED_CHANGELOG_DIR = "changelogs"
VERSIONED_BRANCH_PREFIXES = ("release/", "hotfix/")


def resolve_changelog_path(base_ref: str, override: Optional[str] = None) -> str:
    """Return the changelog path a pull request into *base_ref* must touch."""
    if override:
        return override
    if base_ref.startswith(VERSIONED_BRANCH_PREFIXES):
        full_version = base_ref.split("/")[1]
        major_minor = ".".join(full_version.split(".")[:2])
        return f"{VERSIONED_CHANGELOG_DIR}/{major_minor}.md"
    return DEFAULT_CHANGELOG
