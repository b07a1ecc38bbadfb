import datetime

import numpy as np
import pytest

from chk import UNDEFINED
from chk.clone import CloneError, clone
from chk.tipe import classify, is_defined, is_error, truthy


@pytest.mark.parametrize(
    "value,tag",
    [
        ({}, "object"),
        ([], "array"),
        ((1,), "array"),
        ("s", "string"),
        (1, "number"),
        (1.5, "number"),
        (True, "boolean"),
        (len, "function"),
        (lambda: 1, "function"),
        (None, "null"),
        (UNDEFINED, "undefined"),
        (ValueError("x"), "error"),
        (np.int64(3), "number"),
        (np.float32(1.5), "number"),
        (np.bool_(True), "boolean"),
        (np.arange(3), "array"),
        (datetime.date(2020, 1, 1), "date"),
    ],
)
def test_classify(value, tag):
    assert classify(value) == tag


def test_undefined_is_a_falsy_singleton():
    import copy

    assert not UNDEFINED
    assert copy.deepcopy(UNDEFINED) is UNDEFINED
    assert repr(UNDEFINED) == "UNDEFINED"
    assert not is_defined(UNDEFINED)
    assert is_defined(None)


def test_is_error():
    assert is_error(KeyError("k"))
    assert not is_error("error")


def test_truthy():
    assert truthy(" Yes ")
    assert not truthy("nope")
    assert truthy(1) and not truthy(0)
    assert not truthy(None) and not truthy(UNDEFINED)
    assert truthy(np.array([0])) and not truthy(np.array([]))


def test_clone_is_deep_and_json_shaped():
    src = {"a": [1, {"b": 2}], "t": (1, 2), 3: "int key"}
    out = clone(src)
    assert out == {"a": [1, {"b": 2}], "t": [1, 2], "3": "int key"}
    out["a"][1]["b"] = 99
    assert src["a"][1]["b"] == 2


def test_clone_scalars_pass_through():
    for v in (None, "s", 1, 2.5, True):
        assert clone(v) == v


def test_clone_numpy_values():
    assert clone({"v": np.arange(3), "n": np.int32(4)}) == {"v": [0, 1, 2], "n": 4}


@pytest.mark.parametrize(
    "bad",
    [
        {"f": lambda: 1},
        [object()],
    ],
)
def test_clone_failures(bad):
    with pytest.raises(CloneError):
        clone(bad)


def test_clone_cycle_fails():
    cyc = {}
    cyc["self"] = cyc
    with pytest.raises(CloneError):
        clone(cyc)
