"""Exceptions for maybe-pydantic."""

from __future__ import annotations

from typing import Any


class MaybeError(Exception):
    """Root exception for the maybe-pydantic package."""


class SchemaDefinitionError(MaybeError):
    """Raised when an object cannot be turned into a validation schema.

    Wraps pydantic's schema-generation errors so callers only need to
    handle the package hierarchy.
    """

    def __init__(self, target: object, reason: str | None = None) -> None:
        self.target = target
        self.reason = reason
        msg = f"Cannot build a validation schema for {target!r}"
        if reason:
            msg += f" - {reason}"
        super().__init__(msg)


class AsyncRefinementError(MaybeError):
    """Raised when an asynchronous refinement is hit during synchronous validation.

    Use ``safe_validate_async`` (or ``async_maybe``) for schemas that carry
    async refinements.
    """

    def __init__(self, message: str) -> None:
        self.refinement_message = message
        super().__init__(
            "Asynchronous refinement encountered during synchronous validation "
            f"(refinement message: {message!r}); use async validation instead"
        )


class RefinementError(MaybeError):
    """Failure diagnostic produced when one or more refinements reject the data.

    Carries pydantic-shaped error entries so it can be projected exactly like
    :class:`pydantic.ValidationError`: ``{"type", "loc", "msg"}``.
    """

    def __init__(self, errors: list[dict[str, Any]]) -> None:
        self._errors = list(errors)
        super().__init__("; ".join(str(e.get("msg", "")) for e in self._errors))

    def errors(self) -> list[dict[str, Any]]:
        return list(self._errors)

    def error_count(self) -> int:
        return len(self._errors)
