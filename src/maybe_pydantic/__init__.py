"""maybe-pydantic — pydantic validation folded into ``(error, value)`` pairs.

Depends only on pydantic v2.
"""

from __future__ import annotations

from .diagnostics import format_issues, issues_from_error
from .exceptions import (
    AsyncRefinementError,
    MaybeError,
    RefinementError,
    SchemaDefinitionError,
)
from .maybe import async_maybe, maybe
from .ports import ISchema
from .result import UNKNOWN_ERROR, MaybeResult, SafeValidationResult
from .schema import Refinement, Schema, as_schema

__all__: list[str] = [
    # Validators
    "async_maybe",
    "maybe",
    # Schema
    "ISchema",
    "Refinement",
    "Schema",
    "as_schema",
    # Results
    "MaybeResult",
    "SafeValidationResult",
    "UNKNOWN_ERROR",
    # Diagnostics
    "format_issues",
    "issues_from_error",
    # Exceptions
    "AsyncRefinementError",
    "MaybeError",
    "RefinementError",
    "SchemaDefinitionError",
]
