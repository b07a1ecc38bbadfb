"""Value type classifier.

`classify(x)` returns the semantic tag the engine dispatches on:

    object, array, string, number, boolean, function, null, undefined, error

Any other object classifies as its lower-cased class name (``datetime``,
``decimal``, ...) so a schema may still name it in a ``type`` enum.

numpy scalars and arrays are folded into the JSON-like tags so values coming
out of numeric pipelines validate the same way as plain Python values.
"""
from __future__ import annotations

from collections.abc import Mapping
from typing import Any

import numpy as np

__all__ = [
    "UNDEFINED",
    "classify",
    "is_defined",
    "is_error",
    "truthy",
    "TRUTHY_STRINGS",
]


class _Undefined:
    """Singleton for "no value here" (a missing key), distinct from None."""

    __slots__ = ()
    _instance: "_Undefined | None" = None

    def __new__(cls) -> "_Undefined":
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __bool__(self) -> bool:
        return False

    def __repr__(self) -> str:
        return "UNDEFINED"

    def __copy__(self) -> "_Undefined":
        return self

    def __deepcopy__(self, memo: Any) -> "_Undefined":
        return self

    def __reduce__(self) -> str:
        return "UNDEFINED"


UNDEFINED = _Undefined()

# Strings that read as true under boolean coercion (case-insensitive, stripped).
TRUTHY_STRINGS = frozenset({"1", "true", "yes", "on"})


def classify(x: Any) -> str:
    if x is UNDEFINED:
        return "undefined"
    if x is None:
        return "null"
    # bool before number: bool is an int subclass
    if isinstance(x, (bool, np.bool_)):
        return "boolean"
    if isinstance(x, (int, float, np.integer, np.floating)):
        return "number"
    if isinstance(x, str):
        return "string"
    if isinstance(x, BaseException):
        return "error"
    if isinstance(x, Mapping):
        return "object"
    if isinstance(x, (list, tuple, np.ndarray)):
        return "array"
    if callable(x):
        return "function"
    return type(x).__name__.lower()


def is_defined(x: Any) -> bool:
    return x is not UNDEFINED


def is_error(x: Any) -> bool:
    return isinstance(x, BaseException)


def truthy(x: Any) -> bool:
    """Loose truthiness used for boolean coercion.

    Strings are true only for the usual affirmative spellings ("true", "yes",
    "on", "1", ...); everything else falls back to Python truthiness.
    """
    if isinstance(x, str):
        return x.strip().lower() in TRUTHY_STRINGS
    if x is UNDEFINED or x is None:
        return False
    if isinstance(x, np.ndarray):
        return bool(x.size)
    return bool(x)
