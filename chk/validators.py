"""Calling user-supplied validator functions.

A validator is any callable ``fn(value, ctx) -> falsy | error | message``:

    def even(value, ctx):
        if value % 2:
            return f"{ctx.key} must be even"

`ctx` is a `ValidatorContext` carrying the original top-level value, so
cross-field checks can look at siblings of the node being validated.

Warning: validators are trusted code. Pass ``untrusted=True`` when the schema
comes from somewhere you don't control; every validator node then fails with
badSchema instead of running.
"""
from __future__ import annotations

import copy
from collections.abc import Mapping
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any, Callable, Optional

from .errors import BadSchemaError, BadValueError, ChkError, make_error
from .options import public_options

__all__ = ["ValidatorContext", "call_validator"]


@dataclass(frozen=True)
class ValidatorContext:
    """What a validator gets besides the value itself."""

    root_value: Any
    key: Any = None
    options: Mapping[str, Any] = field(default_factory=dict)


def _context(options: Mapping[str, Any]) -> ValidatorContext:
    return ValidatorContext(
        root_value=options.get("root_value"),
        key=options.get("key"),
        options=MappingProxyType(public_options(options)),
    )


def call_validator(fn: Callable[..., Any], value: Any, options: Mapping[str, Any]) -> Optional[ChkError]:
    """Run `fn` against `value`; return None on success or a ChkError.

    Exceptions raised inside `fn` never escape: they become badSchema errors
    chained to the original exception. A returned ChkError is kept as-is; any
    other exception instance or truthy result becomes a badValue error.
    """
    if options.get("untrusted"):
        return make_error("badSchema", "function validators are disabled for untrusted schemas")
    try:
        result = fn(value, _context(options))
    except Exception as e:
        err = BadSchemaError(f"Validator threw exception: {e}")
        err.__cause__ = e
        return err
    if not result:
        return None
    if isinstance(result, ChkError):
        if result.code is None:
            result = copy.copy(result)
            result.code = BadValueError.code
        return result
    if isinstance(result, BaseException):
        err = BadValueError(str(result))
        err.__cause__ = result
        return err
    return BadValueError(str(result))
