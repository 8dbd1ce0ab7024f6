"""Load and merge configuration from .changelog-enforcer.toml and action inputs."""

from __future__ import annotations

import dataclasses
import os
import sys
from pathlib import Path
from typing import Any, Dict, Optional

if sys.version_info >= (3, 11):
    import tomllib
else:
    import tomli as tomllib

from changelog_enforcer.config.schema import ChangelogEnforcerConfig, EnforcerConfig

CONFIG_FILENAME = ".changelog-enforcer.toml"


class ConfigError(Exception):
    """Raised when config is malformed or unreadable."""


def find_config_file(repo_root: Path, override: Optional[str] = None) -> Optional[Path]:
    """Locate the config file. *override* takes precedence."""
    if override:
        p = Path(override)
        if not p.is_file():
            raise ConfigError(f"Config file not found: {override}")
        return p
    candidate = repo_root / CONFIG_FILENAME
    return candidate if candidate.is_file() else None


def _parse_toml(path: Path) -> Dict[str, Any]:
    try:
        with open(path, "rb") as f:
            return tomllib.load(f)
    except (OSError, tomllib.TOMLDecodeError) as exc:
        raise ConfigError(f"Failed to parse {path}: {exc}") from exc


def _action_input(name: str) -> str:
    """Read a GitHub Actions input the way ``core.getInput`` names it."""
    return os.environ.get(f"INPUT_{name.replace(' ', '_').upper()}", "").strip()


def _merge_env_overrides(cfg: ChangelogEnforcerConfig) -> None:
    """Apply action inputs (INPUT_SKIPLABEL, INPUT_CHANGELOGPATH)."""
    if val := _action_input("skipLabel"):
        cfg.enforcer.skip_label = val
    if val := _action_input("changeLogPath"):
        cfg.enforcer.changelog_path = val


def _build_section(data: Dict[str, Any], cls: type, section: str):
    """Build a dataclass from a TOML section dict, ignoring unknown keys."""
    section_data = data.get(section, {})
    if not isinstance(section_data, dict):
        raise ConfigError(f"[{section}] must be a table")
    valid_fields = {f.name for f in dataclasses.fields(cls)}
    filtered = {k: v for k, v in section_data.items() if k in valid_fields}
    for key, value in filtered.items():
        if not isinstance(value, str):
            raise ConfigError(f"{section}.{key} must be a string, got {type(value).__name__}")
    return cls(**filtered)


def load_config(
    repo_root: Path,
    config_override: Optional[str] = None,
) -> ChangelogEnforcerConfig:
    """Load, validate, and return a ChangelogEnforcerConfig."""
    config_path = find_config_file(repo_root, config_override)

    if config_path is None:
        cfg = ChangelogEnforcerConfig()
    else:
        raw = _parse_toml(config_path)
        cfg = ChangelogEnforcerConfig(
            version=str(raw.get("version", "1.0")),
            enforcer=_build_section(raw, EnforcerConfig, "enforcer"),
        )

    _merge_env_overrides(cfg)
    return cfg
