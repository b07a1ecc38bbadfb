"""Scalar rules carried by a schema node's ``value`` field.

The field means different things depending on what it holds, so it is read
once into one of a closed set of rule types:

    NoRule         -- absent
    EnumRule       -- "a|b|c": value must equal one member exactly
    LiteralRule    -- 3 / True: value must equal the literal (same type)
    ValidatorRule  -- callable: run as a validator
    InvalidRule    -- anything else; a schema-authoring error
"""
from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any, Callable, Optional, Tuple, Union

from .errors import ChkError, make_error
from .options import key_label
from .tipe import UNDEFINED, classify
from .validators import call_validator

__all__ = [
    "NoRule",
    "EnumRule",
    "LiteralRule",
    "ValidatorRule",
    "InvalidRule",
    "Rule",
    "rule_for",
    "match_enum",
]


def match_enum(s: Any, enum: Any) -> bool:
    """True if `s` equals one member of the pipe-delimited `enum` ("foo|bar|baz")."""
    if not isinstance(enum, str) or not isinstance(s, str):
        return False
    return s in enum.split("|")


@dataclass(frozen=True)
class NoRule:
    def apply(self, value: Any, options: Mapping[str, Any]) -> Optional[ChkError]:
        return None


@dataclass(frozen=True)
class EnumRule:
    text: str

    @property
    def members(self) -> Tuple[str, ...]:
        return tuple(self.text.split("|"))

    def apply(self, value: Any, options: Mapping[str, Any]) -> Optional[ChkError]:
        if match_enum(value, self.text):
            return None
        return make_error("badValue", f"{key_label(options)}: {self.text}")


@dataclass(frozen=True)
class LiteralRule:
    literal: Union[int, float, bool]

    def apply(self, value: Any, options: Mapping[str, Any]) -> Optional[ChkError]:
        # 1 == True in Python; the tags must agree too
        if classify(value) == classify(self.literal) and value == self.literal:
            return None
        return make_error("badValue", f"{key_label(options)}: {self.literal}")


@dataclass(frozen=True)
class ValidatorRule:
    fn: Callable[..., Any]

    def apply(self, value: Any, options: Mapping[str, Any]) -> Optional[ChkError]:
        return call_validator(self.fn, value, options)


@dataclass(frozen=True)
class InvalidRule:
    spec: Any

    def apply(self, value: Any, options: Mapping[str, Any]) -> Optional[ChkError]:
        return make_error("badType", f"{key_label(options)}: value rule {self.spec!r}")


Rule = Union[NoRule, EnumRule, LiteralRule, ValidatorRule, InvalidRule]


def rule_for(schema: Mapping[str, Any]) -> Rule:
    """Read the scalar rule out of a schema node."""
    spec = schema.get("value", UNDEFINED)
    tag = classify(spec)
    if tag == "undefined":
        return NoRule()
    if tag == "function":
        return ValidatorRule(spec)
    if tag == "string":
        return EnumRule(spec)
    if tag in ("number", "boolean"):
        return LiteralRule(spec)
    return InvalidRule(spec)
