"""Configuration schema — dataclasses for every config section."""

from __future__ import annotations

from dataclasses import dataclass, field

DEFAULT_SKIP_LABEL = "Skip-Changelog"


@dataclass
class EnforcerConfig:
    skip_label: str = DEFAULT_SKIP_LABEL
    changelog_path: str = ""  # empty = resolve from the base branch


@dataclass
class ChangelogEnforcerConfig:
    version: str = "1.0"
    enforcer: EnforcerConfig = field(default_factory=EnforcerConfig)
