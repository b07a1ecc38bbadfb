"""Coercion of string-typed raw input (query strings, env, CSV) to declared types."""
from __future__ import annotations

import re
from collections.abc import Mapping
from typing import Any

from .tipe import truthy

__all__ = ["coerce", "parse_float_prefix", "parse_int_prefix"]

_FLOAT_RE = re.compile(
    r"^\s*([+-]?(?:Infinity|(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?))"
)
_INT_RE = re.compile(r"^\s*([+-]?)(0[xX][0-9a-fA-F]+|\d+)")


def parse_float_prefix(s: str) -> float | None:
    """Longest leading float literal of `s` ("3.5kg" -> 3.5), or None."""
    m = _FLOAT_RE.match(s)
    if not m:
        return None
    return float(m.group(1).replace("Infinity", "inf"))


def parse_int_prefix(s: str) -> int | None:
    """Longest leading integer literal of `s` ("12px" -> 12, "0x1f" -> 31), or None."""
    m = _INT_RE.match(s)
    if not m:
        return None
    sign, digits = m.groups()
    n = int(digits, 16) if digits[:2] in ("0x", "0X") else int(digits)
    return -n if sign == "-" else n


def _coerce_number(value: str) -> Any:
    f = parse_float_prefix(value)
    i = parse_int_prefix(value)
    out: Any = value
    if f is not None and i is not None and abs(f) > abs(i):
        out = f
    elif i:
        out = i
    if value == "0":
        out = 0
    return out


def coerce(value: Any, schema: Mapping[str, Any]) -> Any:
    """Coerce a str `value` to the schema's declared number or boolean type.

    Non-strings and other declared types pass through unchanged. Strings that
    don't parse as numbers stay strings so the type check can reject them.
    The float result is preferred only when its magnitude is strictly larger
    than the integer prefix's, so "42" -> 42, "3.5" -> 3.5 and "1e2" -> 100.0.
    Without an integer prefix (".5", "Infinity") the string is left alone.
    """
    if not isinstance(value, str):
        return value
    declared = schema.get("type")
    if declared == "number":
        return _coerce_number(value)
    if declared == "boolean":
        return truthy(value)
    return value
