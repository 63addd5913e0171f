from __future__ import annotations

import json
from unittest.mock import MagicMock

import pytest
from pydantic import TypeAdapter
from pydantic import ValidationError as PydanticValidationError

from maybe_pydantic import RefinementError, format_issues, issues_from_error

from .models import User


def _validation_error(payload: object) -> PydanticValidationError:
    with pytest.raises(PydanticValidationError) as exc_info:
        TypeAdapter(User).validate_python(payload)
    return exc_info.value


def test_issues_from_pydantic_error() -> None:
    error = _validation_error({"name": "Al", "age": 0, "email": "a@example.com"})

    issues = issues_from_error(error)

    assert issues == [
        {
            "code": "greater_than",
            "message": "Input should be greater than 0",
            "path": ["age"],
        }
    ]


def test_issues_from_missing_fields() -> None:
    issues = issues_from_error(_validation_error({}))

    assert {issue["code"] for issue in issues} == {"missing"}
    assert sorted(issue["path"][0] for issue in issues) == ["age", "email", "name"]


def test_issues_from_refinement_error() -> None:
    error = RefinementError([{"type": "custom", "loc": ("a", 0), "msg": "Bad"}])

    assert issues_from_error(error) == [
        {"code": "custom", "message": "Bad", "path": ["a", 0]}
    ]


def test_issue_defaults_for_sparse_entries() -> None:
    error = MagicMock()
    error.errors.return_value = [{}]

    assert issues_from_error(error) == [
        {"code": "custom", "message": "validation error", "path": []}
    ]


def test_format_issues_is_a_json_array() -> None:
    error = _validation_error({"name": "A", "age": -5, "email": "invalid"})

    formatted = format_issues(error)

    assert formatted is not None
    decoded = json.loads(formatted)
    assert isinstance(decoded, list)
    assert len(decoded) == 3
    assert all("message" in issue for issue in decoded)


def test_format_issues_without_error() -> None:
    assert format_issues(None) is None


def test_refinement_error_message() -> None:
    error = RefinementError(
        [
            {"type": "custom", "loc": (), "msg": "One"},
            {"type": "custom", "loc": (), "msg": "Two"},
        ]
    )

    assert str(error) == "One; Two"
    assert error.error_count() == 2
