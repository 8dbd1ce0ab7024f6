"""Pull-request context built from a GitHub event payload."""

from __future__ import annotations

import json
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, FrozenSet, Iterable, Union


class EventError(Exception):
    """Raised when the event payload is missing or not a pull-request event."""


@dataclass(frozen=True)
class PullRequestContext:
    """The two pull-request facts the check needs."""

    base_ref: str
    labels: FrozenSet[str] = field(default_factory=frozenset)

    @classmethod
    def create(cls, base_ref: str, labels: Iterable[str] = ()) -> "PullRequestContext":
        return cls(base_ref=base_ref, labels=frozenset(labels))

    @classmethod
    def from_event(cls, payload: Dict[str, Any]) -> "PullRequestContext":
        """Build a context from a ``pull_request`` event payload."""
        pull_request = payload.get("pull_request")
        if not isinstance(pull_request, dict):
            raise EventError("Event payload has no pull_request; run this on pull_request events")
        try:
            base_ref = pull_request["base"]["ref"]
            labels = [label["name"] for label in pull_request.get("labels", [])]
        except (KeyError, TypeError) as exc:
            raise EventError(f"Malformed pull_request payload: missing {exc}") from exc
        if not isinstance(base_ref, str) or not base_ref:
            raise EventError("Malformed pull_request payload: base.ref must be a non-empty string")
        return cls.create(base_ref, labels)


def load_event(path: Union[str, Path]) -> PullRequestContext:
    """Read the event JSON at *path* (usually ``$GITHUB_EVENT_PATH``)."""
    p = Path(path)
    try:
        with open(p, encoding="utf-8") as f:
            payload = json.load(f)
    except OSError as exc:
        raise EventError(f"Cannot read event payload {p}: {exc}") from exc
    except json.JSONDecodeError as exc:
        raise EventError(f"Event payload {p} is not valid JSON: {exc}") from exc
    if not isinstance(payload, dict):
        raise EventError(f"Event payload {p} is not a JSON object")
    return PullRequestContext.from_event(payload)
