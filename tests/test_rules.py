import pytest

from chk.rules import (
    EnumRule,
    InvalidRule,
    LiteralRule,
    NoRule,
    ValidatorRule,
    match_enum,
    rule_for,
)


def _fn(value, ctx):
    return None


@pytest.mark.parametrize(
    "schema,cls",
    [
        ({}, NoRule),
        ({"value": "a|b"}, EnumRule),
        ({"value": 3}, LiteralRule),
        ({"value": 2.5}, LiteralRule),
        ({"value": False}, LiteralRule),
        ({"value": _fn}, ValidatorRule),
        ({"value": None}, InvalidRule),
        ({"value": ["a"]}, InvalidRule),
    ],
)
def test_rule_for_picks_variant(schema, cls):
    assert isinstance(rule_for(schema), cls)


def test_match_enum():
    assert match_enum("b", "a|b|c")
    assert match_enum("", "a||c")
    assert not match_enum("d", "a|b|c")
    assert not match_enum("a", None)
    assert not match_enum(None, "a|b")


def test_enum_rule_members_and_message():
    rule = EnumRule("red|green")
    assert rule.members == ("red", "green")
    assert rule.apply("red", {"key": "color"}) is None
    err = rule.apply("blue", {"key": "color"})
    assert err.code == "badValue"
    assert str(err) == "Invalid Value: color: red|green"


def test_literal_rule_requires_same_type():
    rule = LiteralRule(0)
    assert rule.apply(0, {}) is None
    assert rule.apply(0.0, {}) is None
    assert rule.apply(False, {}).code == "badValue"


def test_invalid_rule_is_bad_type():
    err = InvalidRule({"nested": 1}).apply("x", {"key": "k"})
    assert err.code == "badType"
    assert "k" in str(err)


def test_no_rule_always_passes():
    assert NoRule().apply(object(), {}) is None
