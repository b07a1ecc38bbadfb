"""
Recursive schema checker.

Public API:
    check(value, schema, options=None, **kw) -> ChkError | None
    normalize(value, schema, options=None, **kw) -> value      (raises ChkError)
    check_api(value, schema, options=None, **kw) -> (ok, err, value)

- Returns (or raises) exactly one error: the first failure at any depth.
- May modify `value` in place: defaults are inserted and coerced strings are
  written back into their parent dict/list.
- Never modifies `schema`; defaults are deep-cloned before use.

Schema nodes are plain mappings:

    {
        "type": "object",
        "value": {
            "id": {"type": "number", "required": True},
            "tags": {"type": "array", "value": {"type": "string"}},
            "mode": {"type": "string", "value": "fast|slow", "default": "fast"},
        },
    }

Object fields may also sit directly on the node (``{"id": {...}, "tags": {...}}``);
both spellings are equivalent.
"""
from __future__ import annotations

import copy
import logging
from collections.abc import Mapping, MutableMapping
from pprint import pformat
from typing import Any, Dict, Optional, Tuple

from .clone import CloneError, clone
from .coerce import coerce
from .errors import ChkError, error_class_for, make_error
from .options import DEFAULT_OPTIONS, ROOT_KEYS, key_label, merge_options, public_options, schema_options
from .rules import match_enum, rule_for
from .tipe import UNDEFINED, classify
from .validators import call_validator

__all__ = ["check", "check_api", "normalize", "evaluate", "fail", "RESERVED_KEYS"]

_logger = logging.getLogger(__name__)

Result = Tuple[Optional[ChkError], Any]

# Meta keys of a schema node; everything else on a node is a field schema
RESERVED_KEYS = frozenset({"type", "required", "default", "value", "strict", "validate"})


# ------------------------------
# Errors
# ------------------------------

def _info(value: Any, schema: Any, options: Mapping[str, Any]) -> Dict[str, Any]:
    info: Dict[str, Any] = {"value": value, "schema": schema}
    for k, v in options.items():
        if k in ROOT_KEYS or k == "key":
            continue
        if v:  # only show options that are set
            info[k] = v
    if options.get("key") is not None:
        info["key"] = options["key"]
    return info


def fail(code: str, msg: Any, value: Any, schema: Any, options: Mapping[str, Any]) -> ChkError:
    """Build (or adopt) the error for a failing node and attach its context.

    An exception passed as `msg` is reused: a ChkError is copied and keeps its
    own code (defaulting to `code`), any other exception is wrapped into the
    class for `code` and chained. The caller's error object is never touched.
    """
    if isinstance(msg, ChkError):
        err = copy.copy(msg)
        err.__cause__ = msg.__cause__
        if err.code is None:
            err.code = code
    elif isinstance(msg, BaseException):
        err = error_class_for(code)(str(msg), code=code)
        err.__cause__ = msg
    else:
        err = make_error(code, msg)
    err.info = {**_info(value, schema, options), **err.info}
    _logger.debug("chk fail code=%s key=%r: %s", err.code, options.get("key"), err)
    return err


def _log_args(value: Any, schema: Any, options: Mapping[str, Any]) -> None:
    _logger.info(
        "chk arguments:\n%s",
        pformat({"value": value, "schema": schema, "options": public_options(options)}, depth=10),
    )


# ------------------------------
# Node checks
# ------------------------------

def _is_absent(x: Any) -> bool:
    return x is UNDEFINED or x is None


def _fields(schema: Mapping[str, Any]) -> Mapping[str, Any]:
    nested = schema.get("value")
    if schema.get("type") == "object" and isinstance(nested, Mapping):
        return nested
    return {k: v for k, v in schema.items() if k not in RESERVED_KEYS}


def _check_object(value: Mapping[str, Any], schema: Mapping[str, Any], options: Dict[str, Any]) -> Result:
    fields = _fields(schema)

    # Unknown keys first, so strict failures win over missing ones
    if options.get("strict"):
        for key in value:
            if key not in fields:
                return fail("badParam", key, value, schema, options), value

    if not options.get("ignore_defaults") and isinstance(value, MutableMapping):
        for key, field in fields.items():
            if not isinstance(field, Mapping):
                continue
            default = field.get("default", UNDEFINED)
            if default is UNDEFINED or value.get(key, UNDEFINED) is not UNDEFINED:
                continue
            try:
                value[key] = clone(default)
            except CloneError:
                return fail("badSchema", "Invalid default. Could not serialize as JSON.", value, schema, options), value

    if not options.get("ignore_required"):
        for key, field in fields.items():
            if isinstance(field, Mapping) and field.get("required") and _is_absent(value.get(key, UNDEFINED)):
                return fail("missingParam", key, value, schema, options), value

    for key in list(value):
        field = fields.get(key)
        if not isinstance(field, Mapping):
            continue
        current = value[key]
        err, result = evaluate(current, field, dict(options, key=key))
        if err is not None:
            return err, value
        if result is not current and isinstance(value, MutableMapping):
            value[key] = result
    return None, value


def _check_array(value: Any, schema: Mapping[str, Any], options: Dict[str, Any]) -> Result:
    item_schema = schema.get("value")
    if not isinstance(item_schema, Mapping):
        return None, value
    for i, item in enumerate(value):
        err, result = evaluate(item, item_schema, dict(options, key=i))
        if err is not None:
            return err, value
        if result is not item and isinstance(value, list):
            value[i] = result
    return None, value


def _check_scalar(value: Any, schema: Mapping[str, Any], options: Dict[str, Any]) -> Result:
    if _is_absent(value):
        return None, value
    err = rule_for(schema).apply(value, options)
    if err is not None:
        return fail(err.code or "badValue", err, value, schema, options), value
    return None, value


def evaluate(value: Any, schema: Any, parent_options: Mapping[str, Any]) -> Result:
    """Check one node; return ``(None, value)`` or ``(error, value)``.

    The value half is the possibly replaced value (coerced scalars). Keeping
    the error out of the value slot lets a ChkError sit inside the data.
    """
    if not isinstance(schema, Mapping):
        return None, value

    options = merge_options(parent_options, schema_options(schema))
    if options.get("log"):
        _log_args(value, schema, options)

    if schema.get("required") and not options.get("ignore_required") and _is_absent(value):
        return fail("missingParam", key_label(options), value, schema, options), value

    if not options.get("do_not_coerce"):
        value = coerce(value, schema)

    declared = schema.get("type")
    if isinstance(declared, str) and value is not UNDEFINED:
        tag = classify(value)
        if not match_enum(tag, declared):
            return fail("badType", f"{key_label(options)}: {tag}", value, schema, options), value

    tag = classify(value)
    if tag == "object":
        err, result = _check_object(value, schema, options)
    elif tag == "array":
        err, result = _check_array(value, schema, options)
    else:
        err, result = _check_scalar(value, schema, options)
    if err is not None:
        return err, result

    validate = schema.get("validate")
    if callable(validate):
        err = call_validator(validate, result, options)
        if err is not None:
            return fail(err.code or "badValue", err, result, schema, options), result

    return None, result


# ------------------------------
# Entry points
# ------------------------------

def _run(value: Any, schema: Any, options: Optional[Mapping[str, Any]], overrides: Dict[str, Any]) -> Tuple[Optional[ChkError], Any]:
    opts = merge_options(DEFAULT_OPTIONS, {**dict(options or {}), **overrides})
    if not isinstance(schema, Mapping):
        return fail("badSchema", "schema object is required", value, schema, opts), value

    # For contextual validators and error reporting
    opts["root_value"] = value
    opts["root_schema"] = schema

    err, result = evaluate(value, schema, opts)
    if err is not None:
        return err, value
    return None, result


def check(value: Any, schema: Any, options: Optional[Mapping[str, Any]] = None, **kw: Any) -> Optional[ChkError]:
    """Check `value` against `schema`; return None on success or the first ChkError.

    Options may be passed as a mapping, as keywords, or both (keywords win):
    strict, ignore_defaults, ignore_required, do_not_coerce, untrusted, log.
    """
    err, _ = _run(value, schema, options, kw)
    return err


def normalize(value: Any, schema: Any, options: Optional[Mapping[str, Any]] = None, **kw: Any) -> Any:
    """Check and return the normalized value; raise the ChkError on failure.

    Unlike `check`, this also surfaces coercion of an immutable root
    (``normalize("42", {"type": "number"}) == 42``).
    """
    err, result = _run(value, schema, options, kw)
    if err is not None:
        raise err
    return result


def check_api(value: Any, schema: Any, options: Optional[Mapping[str, Any]] = None, **kw: Any) -> Tuple[bool, Optional[ChkError], Any]:
    """Stable, non-raising API.

    Returns a tuple: (ok, err, value).
    - On success: (True, None, normalized_value)
    - On failure: (False, err, None)
    """
    err, result = _run(value, schema, options, kw)
    if err is not None:
        return False, err, None
    return True, None, result
