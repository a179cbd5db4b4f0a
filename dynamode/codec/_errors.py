"""
Codec errors — two disjoint taxonomies, one per direction.

Errors are values, carried in kungfu.Error. They are created where the fault
is found and travel up unchanged.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, auto

from dynamode._types import Path, render_path

# ═══════════════════════════════════════════════════════════════════════════════
# Encode
# ═══════════════════════════════════════════════════════════════════════════════


class EncodeErrorKind(Enum):
    """Kinds of encode errors."""

    ROOT_NOT_OBJECT = auto()  # Item root is not a mapping
    UNREPRESENTABLE_NUMBER = auto()  # NaN, infinity
    MAX_DEPTH_EXCEEDED = auto()  # Nested deeper than Policy.max_depth
    UNSUPPORTED_TYPE = auto()  # Not structured data at all (set, bytes, object...)


@dataclass(frozen=True, slots=True)
class EncodeError:
    """
    Structured → wire failure.

    path: where the offending value sits, e.g. ("items", 2, "price").
    detail: the offending value's repr or type name, when there is one.
    """

    kind: EncodeErrorKind
    message: str
    path: Path = ()
    detail: str | None = None

    @property
    def location(self) -> str:
        return render_path(self.path)

    def __str__(self) -> str:
        return f"{self.kind.name} at {self.location}: {self.message}"


# ═══════════════════════════════════════════════════════════════════════════════
# Decode
# ═══════════════════════════════════════════════════════════════════════════════


class DecodeErrorKind(Enum):
    """Kinds of decode errors."""

    ROOT_NOT_OBJECT = auto()  # Item root is not a map
    MALFORMED_NUMBER = auto()  # N text is not decimal
    NON_FINITE_NUMBER = auto()  # N text is NaN/Infinity or overflows a float
    UNSUPPORTED_VARIANT = auto()  # B, SS, NS, BS or a foreign object
    MAX_DEPTH_EXCEEDED = auto()  # Nested deeper than Policy.max_depth


@dataclass(frozen=True, slots=True)
class DecodeError:
    """
    Wire → structured failure.

    detail: the malformed number text for MALFORMED_NUMBER and
    NON_FINITE_NUMBER, the variant tag for UNSUPPORTED_VARIANT.
    """

    kind: DecodeErrorKind
    message: str
    path: Path = ()
    detail: str | None = None

    @property
    def location(self) -> str:
        return render_path(self.path)

    def __str__(self) -> str:
        return f"{self.kind.name} at {self.location}: {self.message}"


# ═══════════════════════════════════════════════════════════════════════════════
# Exports
# ═══════════════════════════════════════════════════════════════════════════════

__all__ = (
    "EncodeErrorKind",
    "EncodeError",
    "DecodeErrorKind",
    "DecodeError",
)
