"""Pipeline signaling — info lines and the failure annotation.

Under GitHub Actions the failure is emitted as an ``::error::`` workflow
command; elsewhere it is printed to stderr through Rich.
"""

from __future__ import annotations

import os
from typing import Optional

from rich.console import Console
from rich.markup import escape


def detect_github_actions() -> bool:
    """Auto-detect the GitHub Actions runner."""
    return os.environ.get("GITHUB_ACTIONS", "").lower() in ("true", "1", "yes")


def escape_data(message: str) -> str:
    """Escape a workflow command message (same rules as @actions/core)."""
    return message.replace("%", "%25").replace("\r", "%0D").replace("\n", "%0A")


class Reporter:
    """Collects the run outcome and writes it where the pipeline reads it."""

    def __init__(
        self,
        *,
        annotations: Optional[bool] = None,
        console: Optional[Console] = None,
    ) -> None:
        self.annotations = detect_github_actions() if annotations is None else annotations
        self.console = console or Console(stderr=True)
        self.failed = False
        self.failure_message: Optional[str] = None

    def info(self, message: str) -> None:
        print(message)

    def set_failed(self, message: str) -> None:
        """Mark the run failed. The CLI turns this into exit code 1."""
        self.failed = True
        self.failure_message = message
        if self.annotations:
            print(f"::error::{escape_data(message)}")
        else:
            self.console.print(f"[bold red]Error:[/bold red] {escape(message)}", highlight=False)
