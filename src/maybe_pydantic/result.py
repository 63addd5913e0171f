"""Result types: the safe-validation outcome and the (error, value) pair."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Generic, NamedTuple, TypeVar

T = TypeVar("T")

UNKNOWN_ERROR = "Unknown error"
"""Sentinel returned by the async validator when resolution or validation blows up."""


@dataclass(frozen=True)
class SafeValidationResult(Generic[T]):
    """Tagged outcome of a safe validation call.

    Usage::

        result = SafeValidationResult.succeeded(data)
        result = SafeValidationResult.failed(exc)
    """

    success: bool
    data: T | None = None
    error: Any = None

    # ── Factory methods ──────────────────────────────────────────

    @classmethod
    def succeeded(cls, data: T) -> SafeValidationResult[T]:
        return cls(success=True, data=data)

    @classmethod
    def failed(cls, error: Any) -> SafeValidationResult[T]:
        return cls(success=False, error=error)


class MaybeResult(NamedTuple):
    """``(error, value)`` pair; exactly one side is set.

    Unpacks like a plain tuple::

        error, value = validate(payload)
        if error is not None:
            ...
    """

    error: str | None
    value: Any

    @classmethod
    def ok(cls, value: Any) -> MaybeResult:
        return cls(None, value)

    @classmethod
    def fail(cls, error: str | None) -> MaybeResult:
        return cls(error, None)

    @property
    def is_ok(self) -> bool:
        return self.error is None
