"""
Encoder — structured data → wire values.

Pure and reentrant. The first failure anywhere in the tree aborts the whole
call; nothing partial is returned.
"""

from __future__ import annotations

import math
from collections.abc import Mapping
from decimal import Decimal
from typing import Any

from kungfu import Result, Ok, Error

from dynamode._types import Path, StructuredInput
from dynamode.codec._errors import EncodeError, EncodeErrorKind
from dynamode.codec._policy import Policy, DEFAULT_POLICY
from dynamode.wire._types import S, N, BOOL, NULL, L, M, WireValue

# ═══════════════════════════════════════════════════════════════════════════════
# Numbers
# ═══════════════════════════════════════════════════════════════════════════════


def _unrepresentable(value: Any, path: Path) -> Error[EncodeError]:
    return Error(EncodeError(
        kind=EncodeErrorKind.UNREPRESENTABLE_NUMBER,
        message=f"number has no decimal representation: {value!r}",
        path=path,
        detail=repr(value),
    ))


def _encode_number(value: int | float | Decimal, path: Path) -> Result[WireValue, EncodeError]:
    """
    Integers keep their exact digits; floats use repr() so "473.0" stays a
    float on the way back.
    """
    match value:
        case int():
            try:
                return Ok(N(str(int(value))))
            except ValueError:
                # Past sys.get_int_max_str_digits()
                return _unrepresentable(f"<int with {value.bit_length()} bits>", path)
        case float():
            if not math.isfinite(value):
                return _unrepresentable(value, path)
            return Ok(N(repr(float(value))))
        case _:
            if not value.is_finite():
                return _unrepresentable(value, path)
            return Ok(N(str(value)))


# ═══════════════════════════════════════════════════════════════════════════════
# Containers
# ═══════════════════════════════════════════════════════════════════════════════


def _too_deep(path: Path, policy: Policy) -> Error[EncodeError]:
    return Error(EncodeError(
        kind=EncodeErrorKind.MAX_DEPTH_EXCEEDED,
        message=f"nested deeper than {policy.max_depth} levels",
        path=path,
    ))


def _encode_list(
    items: list[Any] | tuple[Any, ...],
    path: Path,
    depth: int,
    policy: Policy,
) -> Result[WireValue, EncodeError]:
    if depth >= policy.max_depth:
        return _too_deep(path, policy)

    out: list[WireValue] = []
    for index, item in enumerate(items):
        match _encode(item, (*path, index), depth + 1, policy):
            case Ok(wire):
                out.append(wire)
            case Error(e):
                return Error(e)
    return Ok(L(tuple(out)))


def _encode_map(
    fields: Mapping[Any, Any],
    path: Path,
    depth: int,
    policy: Policy,
) -> Result[M, EncodeError]:
    if depth >= policy.max_depth:
        return _too_deep(path, policy)

    out: dict[str, WireValue] = {}
    for name, item in fields.items():
        if not isinstance(name, str):
            return Error(EncodeError(
                kind=EncodeErrorKind.UNSUPPORTED_TYPE,
                message=f"map keys must be str, got {type(name).__name__}",
                path=path,
                detail=repr(name),
            ))
        match _encode(item, (*path, name), depth + 1, policy):
            case Ok(wire):
                out[name] = wire
            case Error(e):
                return Error(e)
    return Ok(M(out))


# ═══════════════════════════════════════════════════════════════════════════════
# Dispatch
# ═══════════════════════════════════════════════════════════════════════════════


def _encode(
    value: Any,
    path: Path,
    depth: int,
    policy: Policy,
) -> Result[WireValue, EncodeError]:
    match value:
        # bool before int: True is an int too
        case bool():
            return Ok(BOOL(value))
        case str():
            return Ok(S(str(value)))
        case None:
            return Ok(NULL(True))
        case int() | float() | Decimal():
            return _encode_number(value, path)
        case list() | tuple():
            return _encode_list(value, path, depth, policy)
        case Mapping():
            return _encode_map(value, path, depth, policy)
        case _:
            return Error(EncodeError(
                kind=EncodeErrorKind.UNSUPPORTED_TYPE,
                message=f"not structured data: {type(value).__name__}",
                path=path,
                detail=type(value).__name__,
            ))


def encode(
    value: StructuredInput,
    policy: Policy = DEFAULT_POLICY,
) -> Result[WireValue, EncodeError]:
    """
    Encode any structured value.

    Example:
        encode(473)           # Ok(N("473"))
        encode([None, True])  # Ok(L((NULL(True), BOOL(True))))
        encode(float("nan"))  # Error(EncodeError(UNREPRESENTABLE_NUMBER, ...))
    """
    return _encode(value, (), 0, policy)


def encode_item(
    value: StructuredInput,
    policy: Policy = DEFAULT_POLICY,
) -> Result[M, EncodeError]:
    """
    Encode a record's fields into a wire map.

    The store only takes field → value items, so a root that is not a
    mapping fails with ROOT_NOT_OBJECT.

    Example:
        encode_item({"pk": "tesla", "horsepower": 420})
        # Ok(M({"pk": S("tesla"), "horsepower": N("420")}))
    """
    if not isinstance(value, Mapping):
        return Error(EncodeError(
            kind=EncodeErrorKind.ROOT_NOT_OBJECT,
            message=f"item root must be a mapping, got {type(value).__name__}",
            detail=type(value).__name__,
        ))

    return _encode_map(value, (), 0, policy)


# ═══════════════════════════════════════════════════════════════════════════════
# Exports
# ═══════════════════════════════════════════════════════════════════════════════

__all__ = ("encode", "encode_item")
