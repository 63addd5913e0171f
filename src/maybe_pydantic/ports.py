"""ISchema — the safe-validation capability the validators depend on."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Protocol, runtime_checkable

if TYPE_CHECKING:
    from .result import SafeValidationResult


@runtime_checkable
class ISchema(Protocol):
    """Protocol for schemas usable by ``maybe`` and ``async_maybe``.

    Any object implementing both methods is accepted as-is; everything else
    is wrapped in :class:`~maybe_pydantic.schema.Schema`.
    """

    def safe_validate(self, data: Any) -> SafeValidationResult[Any]:
        """Validate *data* without raising on rule violations."""
        ...

    async def safe_validate_async(self, data: Any) -> SafeValidationResult[Any]:
        """Validate *data*, awaiting async refinements.

        Rule violations (async refinements included) are reported as a
        failed :class:`~maybe_pydantic.result.SafeValidationResult`.
        """
        ...
