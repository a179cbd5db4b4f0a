"""
Decoder — wire values → structured data.

Pure and reentrant. Variants the encoder never produces (B, SS, NS, BS) are
rejected explicitly with UNSUPPORTED_VARIANT.
"""

from __future__ import annotations

import math
import re
from collections.abc import Mapping
from typing import Any

from kungfu import Result, Ok, Error

from dynamode._types import Path, Structured
from dynamode.codec._errors import DecodeError, DecodeErrorKind
from dynamode.codec._policy import Policy, DEFAULT_POLICY
from dynamode.wire._types import S, N, BOOL, NULL, L, M, B, SS, NS, BS, Item, WireValue

# ═══════════════════════════════════════════════════════════════════════════════
# Numbers
# ═══════════════════════════════════════════════════════════════════════════════

_INTEGER = re.compile(r"[+-]?[0-9]+")
_DECIMAL = re.compile(r"[+-]?(?:[0-9]+(?:\.[0-9]*)?|\.[0-9]+)(?:[eE][+-]?[0-9]+)?")
_NON_FINITE = re.compile(r"[+-]?(?:nan|inf|infinity)", re.IGNORECASE)


def _non_finite(text: str, path: Path) -> Error[DecodeError]:
    return Error(DecodeError(
        kind=DecodeErrorKind.NON_FINITE_NUMBER,
        message=f"number is not finite: {text!r}",
        path=path,
        detail=text,
    ))


def _decode_number(text: str, path: Path) -> Result[Structured, DecodeError]:
    """
    Integer text becomes int, other decimal text becomes float.

    Parsing is strict: no surrounding whitespace, underscores or hex, all of
    which int() and float() would otherwise let through.
    """
    if _INTEGER.fullmatch(text):
        try:
            return Ok(int(text))
        except ValueError:
            # Past sys.get_int_max_str_digits(); fall through to float
            pass

    if _DECIMAL.fullmatch(text):
        number = float(text)
        if not math.isfinite(number):
            return _non_finite(text, path)
        return Ok(number)

    if _NON_FINITE.fullmatch(text):
        return _non_finite(text, path)

    return Error(DecodeError(
        kind=DecodeErrorKind.MALFORMED_NUMBER,
        message=f"not a decimal number: {text!r}",
        path=path,
        detail=text,
    ))


# ═══════════════════════════════════════════════════════════════════════════════
# Containers
# ═══════════════════════════════════════════════════════════════════════════════


def _too_deep(path: Path, policy: Policy) -> Error[DecodeError]:
    return Error(DecodeError(
        kind=DecodeErrorKind.MAX_DEPTH_EXCEEDED,
        message=f"nested deeper than {policy.max_depth} levels",
        path=path,
    ))


def _decode_list(
    items: tuple[WireValue, ...],
    path: Path,
    depth: int,
    policy: Policy,
) -> Result[Structured, DecodeError]:
    if depth >= policy.max_depth:
        return _too_deep(path, policy)

    out: list[Structured] = []
    for index, item in enumerate(items):
        match _decode(item, (*path, index), depth + 1, policy):
            case Ok(value):
                out.append(value)
            case Error(e):
                return Error(e)
    return Ok(out)


def _decode_map(
    fields: Mapping[str, WireValue],
    path: Path,
    depth: int,
    policy: Policy,
) -> Result[dict[str, Structured], DecodeError]:
    if depth >= policy.max_depth:
        return _too_deep(path, policy)

    out: dict[str, Structured] = {}
    for name, item in fields.items():
        match _decode(item, (*path, name), depth + 1, policy):
            case Ok(value):
                out[name] = value
            case Error(e):
                return Error(e)
    return Ok(out)


# ═══════════════════════════════════════════════════════════════════════════════
# Dispatch
# ═══════════════════════════════════════════════════════════════════════════════


def _unsupported(name: str, path: Path) -> Error[DecodeError]:
    return Error(DecodeError(
        kind=DecodeErrorKind.UNSUPPORTED_VARIANT,
        message=f"unsupported attribute value: {name}",
        path=path,
        detail=name,
    ))


def _decode(
    wire: Any,
    path: Path,
    depth: int,
    policy: Policy,
) -> Result[Structured, DecodeError]:
    match wire:
        case S(text):
            return Ok(text)
        case N(text):
            return _decode_number(text, path)
        case BOOL(flag):
            return Ok(flag)
        case NULL():
            # The flag is meaningless; the variant itself is the signal
            return Ok(None)
        case L(items):
            return _decode_list(items, path, depth, policy)
        case M(fields):
            return _decode_map(fields, path, depth, policy)
        case B() | SS() | NS() | BS():
            return _unsupported(wire.TAG, path)
        case _:
            return _unsupported(type(wire).__name__, path)


def decode(
    wire: WireValue,
    policy: Policy = DEFAULT_POLICY,
) -> Result[Structured, DecodeError]:
    """
    Decode any wire value.

    Example:
        decode(N("473"))   # Ok(473)
        decode(N("3.14"))  # Ok(3.14)
        decode(B(b"..."))  # Error(DecodeError(UNSUPPORTED_VARIANT, detail="B"))
    """
    return _decode(wire, (), 0, policy)


def decode_item(
    wire: M | Item,
    policy: Policy = DEFAULT_POLICY,
) -> Result[dict[str, Structured], DecodeError]:
    """
    Decode a stored item into a field → value dict.

    Accepts the wire map or its bare field dict (what a store client hands
    back). Anything else fails with ROOT_NOT_OBJECT.
    """
    match wire:
        case M(fields):
            return _decode_map(fields, (), 0, policy)
        case dict():
            return _decode_map(wire, (), 0, policy)
        case _:
            name = getattr(wire, "TAG", type(wire).__name__)
            return Error(DecodeError(
                kind=DecodeErrorKind.ROOT_NOT_OBJECT,
                message=f"item root must be a map, got {name}",
                detail=name,
            ))


# ═══════════════════════════════════════════════════════════════════════════════
# Exports
# ═══════════════════════════════════════════════════════════════════════════════

__all__ = ("decode", "decode_item")
