from __future__ import annotations

import pytest

from dynamode.codec import MAX_DEPTH_CEILING, DecodeErrorKind, Policy, decode, decode_item
from dynamode.wire import S, N, BOOL, NULL, L, M, B, SS, NS, BS

from helpers import expect_ok, expect_error, assert_identical


def test_scalars():
    assert expect_ok(decode(S("tesla"))) == "tesla"
    assert expect_ok(decode(BOOL(False))) is False
    assert expect_ok(decode(NULL(True))) is None


def test_null_flag_is_ignored():
    assert expect_ok(decode(NULL(False))) is None


@pytest.mark.parametrize(
    ("text", "expected"),
    [
        ("473", 473),
        ("-12", -12),
        ("+7", 7),
        ("007", 7),
        ("12345678901234567890123456789012345678", 12345678901234567890123456789012345678),
        ("3.14", 3.14),
        ("473.0", 473.0),
        ("1e3", 1000.0),
        ("1E+30", 1e30),
        ("-2.5e-3", -0.0025),
        (".5", 0.5),
        ("5.", 5.0),
    ],
)
def test_numbers(text, expected):
    assert_identical(expect_ok(decode(N(text))), expected)


@pytest.mark.parametrize("text", ["", "12abc", " 5", "5 ", "1_000", "0x10", "--1", "1e", "e5", "."])
def test_malformed_numbers(text):
    err = expect_error(decode(N(text)))
    assert err.kind is DecodeErrorKind.MALFORMED_NUMBER
    assert err.detail == text


@pytest.mark.parametrize("text", ["NaN", "nan", "Infinity", "-inf", "+INF", "1e400", "-1e999"])
def test_non_finite_numbers(text):
    err = expect_error(decode(N(text)))
    assert err.kind is DecodeErrorKind.NON_FINITE_NUMBER
    assert err.detail == text


@pytest.mark.parametrize(
    ("wire", "tag"),
    [
        (B(b"\x00"), "B"),
        (SS(("a", "b")), "SS"),
        (NS(("1", "2")), "NS"),
        (BS((b"\x00",)), "BS"),
    ],
)
def test_unsupported_variants(wire, tag):
    err = expect_error(decode(wire))
    assert err.kind is DecodeErrorKind.UNSUPPORTED_VARIANT
    assert err.detail == tag


def test_binary_value_is_unsupported_variant_b():
    err = expect_error(decode_item(M({"photo": B(b"\x89PNG")})))
    assert err.kind is DecodeErrorKind.UNSUPPORTED_VARIANT
    assert err.detail == "B"
    assert err.path == ("photo",)


def test_foreign_objects_are_unsupported():
    # Raw DynamoDB JSON handed straight to the decoder
    err = expect_error(decode({"S": "tesla"}))  # type: ignore[arg-type]
    assert err.kind is DecodeErrorKind.UNSUPPORTED_VARIANT
    assert err.detail == "dict"


def test_containers():
    wire = M({
        "tags": L((S("suv"), S("ev"))),
        "engine": M({"hp": N("420"), "electric": BOOL(True)}),
        "empty": L(()),
        "none": M({}),
    })
    assert_identical(
        expect_ok(decode(wire)),
        {"tags": ["suv", "ev"], "engine": {"hp": 420, "electric": True}, "empty": [], "none": {}},
    )


def test_list_error_carries_index():
    err = expect_error(decode(L((N("1"), N("x"), B(b"")))))
    assert err.kind is DecodeErrorKind.MALFORMED_NUMBER
    assert err.path == (1,)


def test_map_error_carries_field_path():
    wire = M({"ok": S("fine"), "stats": M({"weights": L((N("1.5"), N("NaN")))})})
    err = expect_error(decode_item(wire))
    assert err.kind is DecodeErrorKind.NON_FINITE_NUMBER
    assert err.path == ("stats", "weights", 1)
    assert err.location == "$.stats.weights[1]"


def test_decode_item_accepts_bare_field_dict():
    assert expect_ok(decode_item({"pk": S("audi"), "year": N("2024")})) == {"pk": "audi", "year": 2024}


@pytest.mark.parametrize(
    ("wire", "name"),
    [(S("x"), "S"), (L(()), "L"), (N("1"), "N"), (NULL(), "NULL"), ("text", "str")],
)
def test_item_root_must_be_a_map(wire, name):
    err = expect_error(decode_item(wire))  # type: ignore[arg-type]
    assert err.kind is DecodeErrorKind.ROOT_NOT_OBJECT
    assert err.detail == name


def test_depth_guard():
    wire = L(())
    for _ in range(49):
        wire = L((wire,))
    err = expect_error(decode(wire))
    assert err.kind is DecodeErrorKind.MAX_DEPTH_EXCEEDED
    assert len(err.path) == 32


def test_depth_guard_custom_policy():
    wire = M({"a": M({"b": M({})})})
    assert expect_ok(decode(wire, Policy().with_max_depth(3))) == {"a": {"b": {}}}
    err = expect_error(decode(wire, Policy().with_max_depth(2)))
    assert err.kind is DecodeErrorKind.MAX_DEPTH_EXCEEDED
    assert err.path == ("a", "b")


def test_deepest_allowed_policy_still_returns_a_result():
    wire = L(())
    for _ in range(4999):
        wire = L((wire,))
    err = expect_error(decode(wire, Policy(max_depth=MAX_DEPTH_CEILING)))
    assert err.kind is DecodeErrorKind.MAX_DEPTH_EXCEEDED
    assert len(err.path) == MAX_DEPTH_CEILING
