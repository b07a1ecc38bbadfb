"""Per-traversal options and the type-matching override merge."""
from __future__ import annotations

from collections.abc import Mapping
from typing import Any, Dict

from .tipe import classify

__all__ = [
    "DEFAULT_OPTIONS",
    "LATCHING_OPTION_KEYS",
    "NODE_OPTION_KEYS",
    "ROOT_KEYS",
    "key_label",
    "merge_options",
    "public_options",
    "schema_options",
]

DEFAULT_OPTIONS: Dict[str, Any] = {
    "strict": False,
    "ignore_defaults": False,
    "ignore_required": False,
    "do_not_coerce": False,
    "untrusted": False,
    "log": False,
}

# Keys a schema node may set for its own subtree. `strict` goes either way;
# the others can only be switched on, so a schema cannot lift `untrusted`.
NODE_OPTION_KEYS = frozenset({"strict"})
LATCHING_OPTION_KEYS = frozenset({"untrusted", "log"})

# Context stamped at the entry point; never shown in error info or logs
ROOT_KEYS = frozenset({"root_value", "root_schema"})


def merge_options(base: Mapping[str, Any], overrides: Any) -> Dict[str, Any]:
    """Like dict.update, except an existing option only changes to a value of the same type.

    Keys missing from `base` are adopted as-is. For keys already present, the
    override wins only when `classify()` agrees with the base value, so a
    malformed schema field (``strict: "yes"``) can never replace a boolean
    option. Always returns a new dict; neither input is mutated.
    """
    out = dict(base)
    if not isinstance(overrides, Mapping):
        return out
    for k, v in overrides.items():
        if k not in base:
            out[k] = v
        elif classify(v) == classify(base[k]):
            out[k] = v
    return out


def schema_options(schema: Mapping[str, Any]) -> Dict[str, Any]:
    """The option fields a schema node sets for its subtree.

    Only `strict` is read as-is. `untrusted` and `log` are picked up only when
    set to True; every other option belongs to the caller.
    """
    out = {k: schema[k] for k in NODE_OPTION_KEYS if k in schema}
    for k in LATCHING_OPTION_KEYS:
        if schema.get(k) is True:
            out[k] = True
    return out


def public_options(options: Mapping[str, Any]) -> Dict[str, Any]:
    """Options with the root references stripped (for error info and logging)."""
    return {k: v for k, v in options.items() if k not in ROOT_KEYS}


def key_label(options: Mapping[str, Any]) -> str:
    """The traversal key as shown in messages ("<root>" above the first descent)."""
    key = options.get("key")
    return "<root>" if key is None else str(key)
