"""Project validation errors into a JSON-array diagnostic string."""

from __future__ import annotations

import json
from typing import Any


def issues_from_error(error: Any) -> list[dict[str, Any]]:
    """Convert a pydantic-style error into a list of issue dicts.

    Works for :class:`pydantic.ValidationError` and
    :class:`~maybe_pydantic.exceptions.RefinementError`, both of which expose
    ``errors()`` entries with ``type``, ``loc`` and ``msg`` keys.
    """
    issues: list[dict[str, Any]] = []
    for entry in error.errors():
        issues.append(
            {
                "code": entry.get("type", "custom"),
                "message": entry.get("msg", "validation error"),
                "path": list(entry.get("loc", ())),
            }
        )
    return issues


def format_issues(error: Any) -> str | None:
    """Render *error* as an indented JSON array, one entry per violation.

    Returns ``None`` when there is no error to describe.
    """
    if error is None:
        return None
    return json.dumps(issues_from_error(error), indent=2, default=str)
