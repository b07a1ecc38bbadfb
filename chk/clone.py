"""Structural deep clone with JSON round-trip semantics.

Used to copy schema defaults into values so the schema itself is never
aliased. Anything JSON can't represent (callables, cycles, arbitrary objects)
fails with `CloneError`. Tuples come back as lists and mapping keys as strings,
exactly as a JSON round trip would produce them.
"""
from __future__ import annotations

import json
from typing import Any

import numpy as np

__all__ = ["CloneError", "clone"]


class CloneError(ValueError):
    """Value could not be serialized as JSON."""


def _json_default(obj: Any) -> Any:
    # numpy scalars/arrays serialize as their Python equivalents
    if isinstance(obj, (np.generic, np.ndarray)):
        return obj.tolist()
    raise TypeError(f"Object of type {type(obj).__name__} is not JSON serializable")


def clone(obj: Any) -> Any:
    """Return a deep copy of `obj` as produced by json.dumps -> json.loads."""
    # Scalars are immutable; skip the round trip
    if obj is None or isinstance(obj, (str, bool, int, float)):
        return obj
    try:
        return json.loads(json.dumps(obj, default=_json_default))
    except (TypeError, ValueError) as e:
        raise CloneError(str(e)) from e
