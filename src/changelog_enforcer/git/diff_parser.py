"""Name-status diff parser.

Turns the output of ``git diff --name-status`` into ``DiffEntry`` objects and
the set of changed paths. The parser is permissive: the input is a trusted
summary produced by git itself, so only the leading status letter and the
whitespace after it are stripped.
"""

from __future__ import annotations

import re
from typing import Generator

from changelog_enforcer.git.models import ChangedFileSet, DiffEntry

_LINE_SPLIT_RE = re.compile(r"\r?\n")
_STATUS_LINE_RE = re.compile(r"^([A-Z])\s*(.*)$")


class NameStatusParser:
    """Parse name-status diff text and yield DiffEntry objects.

    Usage::

        parser = NameStatusParser(diff_text)
        for entry in parser.parse():
            print(entry.status, entry.path)
    """

    def __init__(self, diff_text: str) -> None:
        self._lines = _LINE_SPLIT_RE.split(diff_text)

    def parse(self) -> Generator[DiffEntry, None, None]:
        """Yield one DiffEntry per line, blank lines included."""
        for line in self._lines:
            m = _STATUS_LINE_RE.match(line)
            if m:
                yield DiffEntry(status=m.group(1), path=m.group(2))
            else:
                # No status letter: the whole line is the path ('' for blanks)
                yield DiffEntry(status="", path=line)


def parse_changed_files(diff_text: str) -> ChangedFileSet:
    """Return the set of paths listed in *diff_text*."""
    return frozenset(entry.path for entry in NameStatusParser(diff_text).parse())
