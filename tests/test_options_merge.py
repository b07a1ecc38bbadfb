import pytest

from chk.options import (
    DEFAULT_OPTIONS,
    key_label,
    merge_options,
    public_options,
    schema_options,
)


def test_defaults_are_all_false():
    assert DEFAULT_OPTIONS == {
        "strict": False,
        "ignore_defaults": False,
        "ignore_required": False,
        "do_not_coerce": False,
        "untrusted": False,
        "log": False,
    }


def test_same_type_override_wins():
    out = merge_options(DEFAULT_OPTIONS, {"strict": True})
    assert out["strict"] is True


def test_different_type_override_is_ignored():
    out = merge_options(DEFAULT_OPTIONS, {"strict": "yes", "ignore_required": 1, "untrusted": None})
    assert out["strict"] is False
    assert out["ignore_required"] is False
    assert out["untrusted"] is False


def test_unknown_keys_are_adopted():
    out = merge_options(DEFAULT_OPTIONS, {"tenant": "acme", "limit": 3})
    assert out["tenant"] == "acme"
    assert out["limit"] == 3


def test_inputs_not_mutated_and_result_is_new():
    base = dict(DEFAULT_OPTIONS)
    over = {"strict": True}
    out = merge_options(base, over)
    assert out is not base
    assert base["strict"] is False
    assert over == {"strict": True}


def test_non_mapping_overrides_copy_base():
    base = {"strict": True}
    out = merge_options(base, None)
    assert out == base and out is not base
    assert merge_options(base, ["strict"]) == base


def test_schema_options_only_picks_option_keys():
    schema = {"type": "object", "strict": True, "required": True, "log": True, "a": {}}
    assert schema_options(schema) == {"strict": True, "log": True}
    assert schema_options({"strict": False}) == {"strict": False}


@pytest.mark.parametrize(
    "node",
    [
        {"untrusted": False, "log": False},
        {"untrusted": "yes", "log": 1},
        {"ignore_defaults": True, "ignore_required": True, "do_not_coerce": True},
    ],
)
def test_schema_options_cannot_lift_caller_options(node):
    assert schema_options(node) == {}


def test_schema_options_can_switch_untrusted_on():
    assert schema_options({"untrusted": True}) == {"untrusted": True}


def test_public_options_strips_root_refs():
    opts = {"strict": True, "root_value": {}, "root_schema": {}, "key": "a"}
    assert public_options(opts) == {"strict": True, "key": "a"}


def test_key_label():
    assert key_label({}) == "<root>"
    assert key_label({"key": None}) == "<root>"
    assert key_label({"key": 0}) == "0"
    assert key_label({"key": "name"}) == "name"
