"""
DynamoDB JSON — the dict shape boto3's low-level client speaks.

    to_json(N("420"))          # {"N": "420"}
    from_json({"S": "tesla"})  # S("tesla")
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from dynamode.wire._types import (
    S,
    N,
    BOOL,
    NULL,
    L,
    M,
    B,
    SS,
    NS,
    BS,
    BY_TAG,
    Item,
    WireValue,
)


class WireFormatError(ValueError):
    """Raised when a DynamoDB JSON value has the wrong shape."""


# ═══════════════════════════════════════════════════════════════════════════════
# Wire → JSON
# ═══════════════════════════════════════════════════════════════════════════════


def to_json(value: WireValue) -> dict[str, Any]:
    """Convert a wire value to its single-tag DynamoDB JSON dict."""
    match value:
        case L(items):
            return {"L": [to_json(v) for v in items]}
        case M(fields):
            return {"M": item_to_json(fields)}
        case SS(members) | NS(members) | BS(members):
            return {value.TAG: list(members)}
        case S() | N() | BOOL() | NULL() | B():
            return {value.TAG: value.value}
        case _:
            raise WireFormatError(f"not a wire value: {type(value).__name__}")


def item_to_json(item: Mapping[str, WireValue]) -> dict[str, dict[str, Any]]:
    """Convert a whole item."""
    return {name: to_json(v) for name, v in item.items()}


# ═══════════════════════════════════════════════════════════════════════════════
# JSON → Wire
# ═══════════════════════════════════════════════════════════════════════════════


_BINARY = (bytes, bytearray)


def _expect(tag: str, payload: Any, kind: type | tuple[type, ...]) -> Any:
    if not isinstance(payload, kind):
        raise WireFormatError(
            f"{tag} payload has wrong type: {type(payload).__name__}"
        )
    return payload


def _expect_members(
    tag: str, payload: Any, kind: type | tuple[type, ...]
) -> tuple[Any, ...]:
    members = _expect(tag, payload, list)
    for m in members:
        _expect(tag, m, kind)
    return tuple(members)


def from_json(raw: Mapping[str, Any]) -> WireValue:
    """
    Convert a DynamoDB JSON dict to a wire value.

    Raises WireFormatError unless `raw` has exactly one known tag with a
    payload of the right type.
    """
    if not isinstance(raw, Mapping) or len(raw) != 1:
        raise WireFormatError(f"expected a single-tag mapping, got {raw!r}")

    [(tag, payload)] = raw.items()
    if tag not in BY_TAG:
        raise WireFormatError(f"unknown tag: {tag!r}")

    match tag:
        case "S":
            return S(_expect(tag, payload, str))
        case "N":
            return N(_expect(tag, payload, str))
        case "BOOL":
            return BOOL(_expect(tag, payload, bool))
        case "NULL":
            return NULL(_expect(tag, payload, bool))
        case "L":
            return L(tuple(from_json(v) for v in _expect(tag, payload, list)))
        case "M":
            return M(item_from_json(_expect(tag, payload, Mapping)))
        case "B":
            return B(bytes(_expect(tag, payload, _BINARY)))
        case "SS":
            return SS(_expect_members(tag, payload, str))
        case "NS":
            return NS(_expect_members(tag, payload, str))
        case _:
            return BS(tuple(bytes(m) for m in _expect_members(tag, payload, _BINARY)))


def item_from_json(raw: Mapping[str, Any]) -> Item:
    """Convert a whole item."""
    return {name: from_json(v) for name, v in raw.items()}


# ═══════════════════════════════════════════════════════════════════════════════
# Exports
# ═══════════════════════════════════════════════════════════════════════════════

__all__ = (
    "WireFormatError",
    "to_json",
    "item_to_json",
    "from_json",
    "item_from_json",
)
