"""Tests for changelog path resolution."""

import pytest

from changelog_enforcer.enforcer.resolver import DEFAULT_CHANGELOG, resolve_changelog_path


class TestDefaultBranches:
    @pytest.mark.parametrize(
        "base_ref",
        ["master", "main", "develop", "feature/release/2.0.0", "releases/1.2.3", "hotfixes/1.0.0", "Release/1.2.3"],
    )
    def test_default_changelog(self, base_ref):
        assert resolve_changelog_path(base_ref) == DEFAULT_CHANGELOG == "CHANGELOG.md"


class TestVersionedBranches:
    @pytest.mark.parametrize("base_ref", ["release/2.99.0", "hotfix/2.99.0"])
    def test_major_minor_changelog(self, base_ref):
        assert resolve_changelog_path(base_ref) == "changelogs/2.99.md"

    def test_extra_segments_dropped(self):
        assert resolve_changelog_path("release/3.1.4.1") == "changelogs/3.1.md"

    def test_only_second_path_segment_used(self):
        assert resolve_changelog_path("release/1.2.3/rc") == "changelogs/1.2.md"

    def test_short_version_not_validated(self):
        assert resolve_changelog_path("release/2") == "changelogs/2.md"


class TestOverride:
    def test_override_wins(self):
        assert resolve_changelog_path("release/2.99.0", "docs/CHANGES.rst") == "docs/CHANGES.rst"

    @pytest.mark.parametrize("override", [None, ""])
    def test_empty_override_falls_back(self, override):
        assert resolve_changelog_path("hotfix/1.4.2", override) == "changelogs/1.4.md"
        assert resolve_changelog_path("develop", override) == "CHANGELOG.md"
