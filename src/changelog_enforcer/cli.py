"""changelog-enforcer CLI — Typer application with check, resolve, and init commands."""

from __future__ import annotations

import asyncio
import functools
from pathlib import Path
from typing import List, Optional

import typer
from rich.console import Console

from changelog_enforcer import __version__

app = typer.Typer(
    name="changelog-enforcer",
    help="Fail pull requests that do not update the changelog.",
    add_completion=False,
    no_args_is_help=True,
)

console = Console(stderr=True)


def _resolve_repo_root() -> Path:
    """Find the git repo root, exit 2 on failure."""
    from changelog_enforcer.git.adapter import GitError, get_repo_root

    try:
        return get_repo_root()
    except GitError as exc:
        console.print(f"[bold red]Error:[/bold red] {exc}")
        raise typer.Exit(code=2) from exc


# ── check ─────────────────────────────────────────────────────────────────────


@app.command()
def check(
    config: Optional[str] = typer.Option(None, "--config", "-c", help="Path to .changelog-enforcer.toml"),
    skip_label: Optional[str] = typer.Option(None, "--skip-label", help="Label that exempts a pull request"),
    changelog_path: Optional[str] = typer.Option(
        None, "--changelog-path", help="Required changelog path (default: derived from the base branch)"
    ),
    event_path: Optional[str] = typer.Option(
        None, "--event-path", envvar="GITHUB_EVENT_PATH", help="Pull request event payload (JSON)"
    ),
    base_ref: Optional[str] = typer.Option(None, "--base-ref", help="Base branch; bypasses the event payload"),
    labels: Optional[List[str]] = typer.Option(None, "--label", "-l", help="Pull request label (repeatable, with --base-ref)"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Verbose output"),
) -> None:
    """Check that the pull request updates its changelog."""
    from changelog_enforcer.config.loader import ConfigError, load_config
    from changelog_enforcer.enforcer.check import run
    from changelog_enforcer.enforcer.context import EventError, PullRequestContext, load_event
    from changelog_enforcer.git.adapter import GitError, get_name_status_diff, get_repo_root
    from changelog_enforcer.output.actions import Reporter

    # Outside a checkout only the diff needs git, and a skipped run never diffs
    try:
        repo_root = get_repo_root()
    except GitError:
        repo_root = Path.cwd()

    if labels and not base_ref:
        console.print("[bold red]Error:[/bold red] --label requires --base-ref")
        raise typer.Exit(code=2)

    # --- Load config ---
    try:
        cfg = load_config(repo_root, config)
    except ConfigError as exc:
        console.print(f"[bold red]Config error:[/bold red] {exc}")
        raise typer.Exit(code=2) from exc

    # --- CLI overrides ---
    if skip_label is not None:
        cfg.enforcer.skip_label = skip_label
    if changelog_path is not None:
        cfg.enforcer.changelog_path = changelog_path

    # --- Pull request context ---
    if base_ref:
        context = PullRequestContext.create(base_ref, labels or [])
    elif event_path:
        try:
            context = load_event(event_path)
        except EventError as exc:
            console.print(f"[bold red]Event error:[/bold red] {exc}")
            raise typer.Exit(code=2) from exc
    else:
        console.print(
            "[bold red]Error:[/bold red] no pull request context; "
            "set GITHUB_EVENT_PATH, --event-path, or --base-ref"
        )
        raise typer.Exit(code=2)

    if verbose:
        console.print(f"[dim]Repo root: {repo_root}[/dim]")
        console.print(f"[dim]Base ref: {context.base_ref}[/dim]")
        console.print(f"[dim]Labels: {', '.join(sorted(context.labels)) or '-'}[/dim]")

    reporter = Reporter()
    passed = asyncio.run(
        run(
            context,
            cfg.enforcer.skip_label,
            cfg.enforcer.changelog_path,
            reporter=reporter,
            run_diff=functools.partial(get_name_status_diff, repo_root),
        )
    )

    raise typer.Exit(code=0 if passed else 1)


# ── resolve ───────────────────────────────────────────────────────────────────


@app.command()
def resolve(
    base_ref: str = typer.Option(..., "--base-ref", help="Base branch name"),
    changelog_path: Optional[str] = typer.Option(None, "--changelog-path", help="Explicit override"),
) -> None:
    """Print the changelog path required for a base branch."""
    from changelog_enforcer.enforcer.resolver import resolve_changelog_path

    print(resolve_changelog_path(base_ref, changelog_path))


# ── init ──────────────────────────────────────────────────────────────────────


@app.command()
def init() -> None:
    """Generate a starter .changelog-enforcer.toml in the repo root."""
    from changelog_enforcer.config.defaults import DEFAULT_TOML
    from changelog_enforcer.config.loader import CONFIG_FILENAME

    repo_root = _resolve_repo_root()
    config_path = repo_root / CONFIG_FILENAME

    if config_path.exists():
        console.print(f"[yellow]⚠[/yellow]  {CONFIG_FILENAME} already exists at {config_path}")
        raise typer.Exit(code=1)

    config_path.write_text(DEFAULT_TOML, encoding="utf-8")
    console.print(f"[green]✓[/green] Created {config_path}")


# ── version ───────────────────────────────────────────────────────────────────


def _version_callback(value: bool) -> None:
    if value:
        print(f"changelog-enforcer {__version__}")
        raise typer.Exit()


@app.callback()
def main(
    version: bool = typer.Option(
        False, "--version", "-V", callback=_version_callback,
        is_eager=True, help="Show version and exit",
    ),
) -> None:
    """changelog-enforcer — require a changelog update on every pull request."""
