"""maybe / async_maybe — validate, transform, and return an ``(error, value)`` pair.

Usage::

    validate_user = maybe(lambda u: u.name, User)
    error, name = validate_user({"name": "Alice", "age": 30})

    validate_user_async = async_maybe(lambda u: u.name, User)
    error, name = await validate_user_async(fetch_user())
"""

from __future__ import annotations

import inspect
import logging
from typing import TYPE_CHECKING, Any, TypeVar

from .diagnostics import format_issues
from .result import UNKNOWN_ERROR, MaybeResult
from .schema import as_schema

if TYPE_CHECKING:
    from collections.abc import Awaitable, Callable

_log = logging.getLogger("maybe_pydantic.maybe")

T = TypeVar("T")
U = TypeVar("U")


def maybe(
    fn: Callable[[T], U],
    schema: Any,
    *,
    strict: bool | None = None,
    logger: logging.Logger | None = None,
) -> Callable[[Any], MaybeResult]:
    """Build a synchronous validator.

    The returned callable validates its argument against *schema*; on success
    it returns ``(None, fn(data))``, on failure ``(diagnostics, None)`` where
    *diagnostics* is a JSON array string with one entry per violation.

    Exceptions raised by *fn* are not caught.
    """
    validator = as_schema(schema, strict=strict)
    log = logger or _log

    def run(data: Any) -> MaybeResult:
        result = validator.safe_validate(data)
        if result.success:
            return MaybeResult.ok(fn(result.data))
        log.debug("%s rejected input", _name(fn))
        return MaybeResult.fail(format_issues(result.error))

    return run


def async_maybe(
    fn: Callable[[T], U],
    schema: Any,
    *,
    strict: bool | None = None,
    logger: logging.Logger | None = None,
) -> Callable[[Awaitable[Any] | Any], Awaitable[MaybeResult]]:
    """Build an asynchronous validator.

    The returned coroutine function awaits its argument, validates the
    resolved value with ``safe_validate_async`` and returns the same pair as
    :func:`maybe`. If awaiting the input or validating it raises, the result
    is ``("Unknown error", None)``; the cause is only logged.

    *fn* runs outside that guard: its exceptions propagate, and an awaitable
    it returns is handed back unresolved as the value.
    """
    validator = as_schema(schema, strict=strict)
    log = logger or _log

    async def run(data: Awaitable[Any] | Any) -> MaybeResult:
        try:
            resolved = await data if inspect.isawaitable(data) else data
            result = await validator.safe_validate_async(resolved)
        except Exception:  # noqa: BLE001
            log.warning(
                "%s could not resolve or validate input", _name(fn), exc_info=True
            )
            return MaybeResult.fail(UNKNOWN_ERROR)

        if result.success:
            return MaybeResult.ok(fn(result.data))
        log.debug("%s rejected input", _name(fn))
        return MaybeResult.fail(format_issues(result.error))

    return run


def _name(fn: Callable[..., Any]) -> str:
    return getattr(fn, "__name__", type(fn).__name__)
