"""Output — pipeline reporter."""

from changelog_enforcer.output.actions import Reporter, detect_github_actions

__all__ = ["Reporter", "detect_github_actions"]
