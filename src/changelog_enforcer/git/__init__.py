"""Git interface layer — adapter, name-status parsing, models."""

from changelog_enforcer.git.adapter import (
    GitError,
    get_name_status_diff,
    get_repo_root,
    name_status_args,
)
from changelog_enforcer.git.diff_parser import NameStatusParser, parse_changed_files
from changelog_enforcer.git.models import ChangedFileSet, DiffEntry

__all__ = [
    "ChangedFileSet",
    "DiffEntry",
    "GitError",
    "NameStatusParser",
    "get_name_status_diff",
    "get_repo_root",
    "name_status_args",
    "parse_changed_files",
]
