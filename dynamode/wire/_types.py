"""
Wire types — DynamoDB attribute values as a closed tagged union.

One frozen dataclass per tag. The class name is the tag.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import ClassVar

# ═══════════════════════════════════════════════════════════════════════════════
# Scalars
# ═══════════════════════════════════════════════════════════════════════════════


@dataclass(frozen=True, slots=True)
class S:
    """String."""

    TAG: ClassVar[str] = "S"
    value: str


@dataclass(frozen=True, slots=True)
class N:
    """
    Number, carried as decimal text.

    Note: The text is kept verbatim — "473" and "473.0" are different values
    here, which is how integer/float fidelity survives the round trip.
    """

    TAG: ClassVar[str] = "N"
    value: str


@dataclass(frozen=True, slots=True)
class BOOL:
    """Boolean."""

    TAG: ClassVar[str] = "BOOL"
    value: bool


@dataclass(frozen=True, slots=True)
class NULL:
    """
    Null marker.

    The store models null as a boolean flag that must be true.
    """

    TAG: ClassVar[str] = "NULL"
    value: bool = True


# ═══════════════════════════════════════════════════════════════════════════════
# Containers
# ═══════════════════════════════════════════════════════════════════════════════


@dataclass(frozen=True, slots=True)
class L:
    """Ordered list of wire values."""

    TAG: ClassVar[str] = "L"
    value: tuple[WireValue, ...] = ()


@dataclass(frozen=True, slots=True)
class M:
    """
    Map of field name to wire value.

    Compares by content; field order is immaterial.
    """

    TAG: ClassVar[str] = "M"
    value: dict[str, WireValue] = field(default_factory=dict)


# ═══════════════════════════════════════════════════════════════════════════════
# Recognised, Never Produced
# ═══════════════════════════════════════════════════════════════════════════════
# Items written by other producers may carry these. The decoder rejects them
# with UNSUPPORTED_VARIANT.


@dataclass(frozen=True, slots=True)
class B:
    """Binary."""

    TAG: ClassVar[str] = "B"
    value: bytes


@dataclass(frozen=True, slots=True)
class SS:
    """String set."""

    TAG: ClassVar[str] = "SS"
    value: tuple[str, ...]


@dataclass(frozen=True, slots=True)
class NS:
    """Number set (decimal text members)."""

    TAG: ClassVar[str] = "NS"
    value: tuple[str, ...]


@dataclass(frozen=True, slots=True)
class BS:
    """Binary set."""

    TAG: ClassVar[str] = "BS"
    value: tuple[bytes, ...]


# ═══════════════════════════════════════════════════════════════════════════════
# Unions
# ═══════════════════════════════════════════════════════════════════════════════

type WireValue = S | N | BOOL | NULL | L | M | B | SS | NS | BS
"""Any attribute value."""

type Item = dict[str, WireValue]
"""A stored item: field name to attribute value."""

VARIANTS: tuple[type, ...] = (S, N, BOOL, NULL, L, M, B, SS, NS, BS)
"""Every wire class, in tag order."""

BY_TAG: dict[str, type] = {cls.TAG: cls for cls in VARIANTS}


# ═══════════════════════════════════════════════════════════════════════════════
# Exports
# ═══════════════════════════════════════════════════════════════════════════════

__all__ = (
    "S",
    "N",
    "BOOL",
    "NULL",
    "L",
    "M",
    "B",
    "SS",
    "NS",
    "BS",
    "WireValue",
    "Item",
    "VARIANTS",
    "BY_TAG",
)
