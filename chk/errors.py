from __future__ import annotations

"""Typed error taxonomy (public).

Only `chk` and `chk.errors` are public import roots. Everything else is internal.
The engine *returns* these errors; only `chk.normalize` raises them.
"""

from typing import Any, Dict, Optional

__all__ = [
    "ChkError",
    "MissingParamError",
    "BadParamError",
    "BadTypeError",
    "BadValueError",
    "BadSchemaError",
    "DocumentError",
    "ERROR_CODES",
    "error_class_for",
    "make_error",
    "format_error",
]


class ChkError(Exception):
    """Base class for all typed errors in chk.

    `code` is the stable, programmatic tag callers branch on; the message is
    human-facing only. `info` is a snapshot of the failing node.
    """

    code: Optional[str] = None

    def __init__(self, message: str = "", *, code: str | None = None, info: Dict[str, Any] | None = None):
        super().__init__(message)
        if code is not None:
            self.code = code
        self.info: Dict[str, Any] = dict(info or {})

    @property
    def message(self) -> str:
        return str(self)


class MissingParamError(ChkError):
    """A required value is absent or None."""
    code = "missingParam"


class BadParamError(ChkError):
    """An object key is not declared by the schema (strict mode)."""
    code = "badParam"


class BadTypeError(ChkError):
    """The value's classified type is not allowed by the schema."""
    code = "badType"


class BadValueError(ChkError):
    """The value fails an enum, literal or validator rule."""
    code = "badValue"


class BadSchemaError(ChkError):
    """The schema (or one of its validators) is broken, not the data."""
    code = "badSchema"


class DocumentError(ChkError):
    """A schema or value document could not be read or parsed (CLI/loader only)."""
    code = "badDocument"


# Engine codes -> human prefix. Order is part of the public contract.
ERROR_CODES: Dict[str, str] = {
    "missingParam": "Missing Required Parameter",
    "badParam": "Unrecognized Parameter",
    "badType": "Invalid Type",
    "badValue": "Invalid Value",
    "badSchema": "Invalid Schema",
}

_CLASSES = {
    "missingParam": MissingParamError,
    "badParam": BadParamError,
    "badType": BadTypeError,
    "badValue": BadValueError,
    "badSchema": BadSchemaError,
}


def error_class_for(code: str | None) -> type[ChkError]:
    """Return the typed error class for an engine code (ChkError for unknown codes)."""
    return _CLASSES.get(code or "", ChkError)


def make_error(code: str, message: Any) -> ChkError:
    """Build the typed error for `code` with the standard prefix ("Invalid Type: ...")."""
    prefix = ERROR_CODES.get(code)
    text = f"{prefix}: {message}" if prefix else str(message)
    return error_class_for(code)(text, code=code)


def format_error(e: BaseException) -> str:
    """Return a short, uniform operator-facing message like 'BadTypeError: detail'."""
    name = e.__class__.__name__
    msg = str(e).strip()
    return f"{name}: {msg}" if msg else name


# Keep star-export order deterministic for tests and tooling
__all__ = sorted(__all__)
