"""Starter .changelog-enforcer.toml template."""

DEFAULT_TOML = """\
# changelog-enforcer configuration
version = "1.0"

[enforcer]
skip_label = "Skip-Changelog"   # pull requests with this label are not checked
# changelog_path = "CHANGELOG.md" # unset = CHANGELOG.md, or changelogs/x.y.md for release/x.y.z and hotfix/x.y.z
"""
