"""changelog-enforcer — fail pull requests that do not update the changelog."""

__version__ = "1.0.0"
