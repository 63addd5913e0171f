"""Schema — pydantic-backed implementation of the ISchema capability.

Wraps a :class:`pydantic.TypeAdapter` so that any type pydantic can validate
(``BaseModel`` subclasses, ``list[float]``, ``Annotated`` constraints,
discriminated unions, ...) reports failures as a
:class:`~maybe_pydantic.result.SafeValidationResult` instead of raising.

Refinements are extra checks run on the validated data, sync or async::

    schema = Schema(Signup).refine(
        lambda s: s.password == s.confirm,
        "Passwords do not match",
        path=("confirm",),
    )
"""

from __future__ import annotations

import inspect
import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

from pydantic import PydanticUserError, TypeAdapter
from pydantic import ValidationError as PydanticValidationError

from .exceptions import AsyncRefinementError, RefinementError, SchemaDefinitionError
from .ports import ISchema
from .result import SafeValidationResult

if TYPE_CHECKING:
    from collections.abc import Awaitable, Callable, Sequence

logger = logging.getLogger("maybe_pydantic.schema")

DEFAULT_REFINEMENT_MESSAGE = "Invalid input"


@dataclass(frozen=True)
class Refinement:
    """A single post-validation check with the issue it reports on rejection."""

    check: Callable[[Any], bool | Awaitable[bool]]
    message: str = DEFAULT_REFINEMENT_MESSAGE
    path: tuple[str | int, ...] = ()

    def issue(self) -> dict[str, Any]:
        return {"type": "custom", "loc": self.path, "msg": self.message}


class Schema:
    """Safe-validation wrapper around a pydantic ``TypeAdapter``.

    Instances are immutable: :meth:`refine` returns a new schema.
    """

    def __init__(
        self,
        target: Any,
        *,
        strict: bool | None = None,
        refinements: Sequence[Refinement] = (),
    ) -> None:
        if isinstance(target, TypeAdapter):
            adapter: TypeAdapter[Any] = target
        else:
            try:
                adapter = TypeAdapter(target)
            except PydanticUserError as exc:
                raise SchemaDefinitionError(target, str(exc)) from exc
        self._adapter = adapter
        self._strict = strict
        self._refinements: tuple[Refinement, ...] = tuple(refinements)

    @property
    def adapter(self) -> TypeAdapter[Any]:
        return self._adapter

    @property
    def strict(self) -> bool | None:
        return self._strict

    @property
    def refinements(self) -> tuple[Refinement, ...]:
        return self._refinements

    def refine(
        self,
        check: Callable[[Any], bool | Awaitable[bool]],
        message: str = DEFAULT_REFINEMENT_MESSAGE,
        *,
        path: Sequence[str | int] = (),
    ) -> Schema:
        """Return a copy of this schema with *check* appended.

        *check* receives the validated data and returns a truthy value (or an
        awaitable resolving to one) when the data is acceptable. Refinements
        only run once base validation has succeeded, and every failing
        refinement contributes one issue.
        """
        refinement = Refinement(check=check, message=message, path=tuple(path))
        return Schema(
            self._adapter,
            strict=self._strict,
            refinements=(*self._refinements, refinement),
        )

    def with_strict(self, strict: bool | None) -> Schema:
        """Return a copy of this schema using *strict* validation mode."""
        return Schema(self._adapter, strict=strict, refinements=self._refinements)

    # ── Validation ───────────────────────────────────────────────

    def _validate_base(self, data: Any) -> SafeValidationResult[Any]:
        try:
            validated = self._adapter.validate_python(data, strict=self._strict)
        except PydanticValidationError as exc:
            logger.debug("Validation failed with %d issue(s)", exc.error_count())
            return SafeValidationResult.failed(exc)
        return SafeValidationResult.succeeded(validated)

    def _finish(
        self, validated: Any, rejected: list[Refinement]
    ) -> SafeValidationResult[Any]:
        if not rejected:
            return SafeValidationResult.succeeded(validated)
        logger.debug("Refinement failed with %d issue(s)", len(rejected))
        return SafeValidationResult.failed(
            RefinementError([refinement.issue() for refinement in rejected])
        )

    def safe_validate(self, data: Any) -> SafeValidationResult[Any]:
        """Validate *data* synchronously.

        Raises :class:`~maybe_pydantic.exceptions.AsyncRefinementError` if a
        refinement returns an awaitable.
        """
        base = self._validate_base(data)
        if not base.success:
            return base

        rejected: list[Refinement] = []
        for refinement in self._refinements:
            outcome = refinement.check(base.data)
            if inspect.isawaitable(outcome):
                if inspect.iscoroutine(outcome):
                    outcome.close()
                raise AsyncRefinementError(refinement.message)
            if not outcome:
                rejected.append(refinement)
        return self._finish(base.data, rejected)

    async def safe_validate_async(self, data: Any) -> SafeValidationResult[Any]:
        """Validate *data*, awaiting async refinements in declaration order."""
        base = self._validate_base(data)
        if not base.success:
            return base

        rejected: list[Refinement] = []
        for refinement in self._refinements:
            outcome = refinement.check(base.data)
            if inspect.isawaitable(outcome):
                outcome = await outcome
            if not outcome:
                rejected.append(refinement)
        return self._finish(base.data, rejected)

    def __repr__(self) -> str:
        return (
            f"Schema({self._adapter!r}, strict={self._strict!r}, "
            f"refinements={len(self._refinements)})"
        )


def as_schema(target: Any, *, strict: bool | None = None) -> ISchema:
    """Coerce *target* into an :class:`~maybe_pydantic.ports.ISchema`.

    Objects already implementing the protocol are returned unchanged (a
    :class:`Schema` is re-moded when *strict* is given); anything else is
    wrapped in a new :class:`Schema`.
    """
    if isinstance(target, Schema):
        return target if strict is None else target.with_strict(strict)
    if isinstance(target, ISchema):
        return target
    return Schema(target, strict=strict)
