from __future__ import annotations

import datetime
import math

import pytest

from envbind.kinds import (
    INT32_MAX,
    INT64_MIN,
    Kind,
    Ref,
    infer_kind,
    parse,
    parse_bool,
    parse_float32,
    parse_float64,
    parse_int32,
    parse_int64,
    parse_string_list,
)


def test_bool_text_forms() -> None:
    for text in ("1", "t", "T", "TRUE", "true", "True"):
        assert parse_bool(text) is True
    for text in ("0", "f", "F", "FALSE", "false", "False"):
        assert parse_bool(text) is False
    for text in ("yes", "on", "tRUE", " true", ""):
        with pytest.raises(ValueError):
            parse_bool(text)


def test_int_syntax_is_strict_base10() -> None:
    assert parse_int64("42") == 42
    assert parse_int64("-7") == -7
    assert parse_int64("+7") == 7
    assert parse_int64("007") == 7
    for text in (" 1", "1 ", "1\n", "1_000", "0x10", "1.0", "", "-"):
        with pytest.raises(ValueError):
            parse_int64(text)


def test_int_ranges() -> None:
    assert parse_int32(str(INT32_MAX)) == INT32_MAX
    with pytest.raises(ValueError, match="out of range"):
        parse_int32(str(INT32_MAX + 1))
    assert parse_int64(str(INT64_MIN)) == INT64_MIN
    with pytest.raises(ValueError, match="out of range"):
        parse_int64(str(INT64_MIN - 1))


def test_float64_forms() -> None:
    assert parse_float64("6.6") == 6.6
    assert parse_float64("1e3") == 1000.0
    assert parse_float64(".5") == 0.5
    assert parse_float64("-Inf") == -math.inf
    assert math.isnan(parse_float64("NaN"))
    for text in ("1e400", "-1e400"):
        with pytest.raises(ValueError, match="out of range"):
            parse_float64(text)
    for text in ("abc", " 1.0", "1\n", "2.5\n", "inf\n", "1_0.0", "1.0f", ""):
        with pytest.raises(ValueError, match="invalid syntax"):
            parse_float64(text)


def test_float32_narrows_precision() -> None:
    assert parse_float32("5.5") == 5.5
    narrowed = parse_float32("0.1")
    assert narrowed != 0.1
    assert abs(narrowed - 0.1) < 1e-8
    assert parse_float32("inf") == math.inf
    with pytest.raises(ValueError, match="out of range"):
        parse_float32("1e39")


def test_string_list_split() -> None:
    assert parse_string_list("a,b,c") == ["a", "b", "c"]
    assert parse_string_list("") == [""]


def test_parse_dispatches_on_kind() -> None:
    assert parse(Kind.STRING, " raw ") == " raw "
    assert parse(Kind.INT, "12") == 12
    assert parse(Kind.BOOL, "F") is False


def test_infer_kind() -> None:
    assert infer_kind(True) is Kind.BOOL
    assert infer_kind(3) is Kind.INT
    assert infer_kind(3.0) is Kind.FLOAT64
    assert infer_kind("") is Kind.STRING
    assert infer_kind([]) is Kind.STRING_LIST
    assert infer_kind(None) is None
    assert infer_kind(datetime.datetime.now()) is None


def test_ref_constructors_set_kind() -> None:
    assert Ref.int32().kind is Kind.INT32
    assert Ref.float32(1.5).value == 1.5
    assert Ref.string_list(["a"]).value == ["a"]
    assert Ref.boolean().resolved_kind() is Kind.BOOL
    assert Ref(7).resolved_kind() is Kind.INT
    assert Ref().resolved_kind() is None
