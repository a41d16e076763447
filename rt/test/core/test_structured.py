from __future__ import annotations

from rt.core.structured import (
    as_obj_list,
    as_str_dict,
    get_int,
    get_raw_str,
    get_str,
    get_table,
    is_str_dict,
)


def test_str_dict() -> None:
    assert is_str_dict({"a": 1})
    assert not is_str_dict({1: "a"})
    assert as_str_dict([1]) is None


def test_obj_list() -> None:
    assert as_obj_list([1, "a"]) == [1, "a"]
    assert as_obj_list({"a": 1}) is None


def test_get_str_strips() -> None:
    table = {"a": "  x ", "b": "   ", "c": 3}
    assert get_str(table, "a") == "x"
    assert get_str(table, "b") is None
    assert get_str(table, "c") is None
    assert get_raw_str(table, "a") == "  x "
    assert get_raw_str(table, "c") is None


def test_get_int_rejects_bool() -> None:
    table = {"n": 3, "flag": True, "s": "3"}
    assert get_int(table, "n") == 3
    assert get_int(table, "flag") is None
    assert get_int(table, "s") is None


def test_get_table() -> None:
    assert get_table({"t": {"k": 1}}, "t") == {"k": 1}
    assert get_table({"t": [1]}, "t") is None
