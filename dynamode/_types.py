"""
Core types for dynamode.

Re-exports from kungfu + the structured-data alias.
"""

from __future__ import annotations

from collections.abc import Mapping
from decimal import Decimal

# Re-export from kungfu
from kungfu import Result, Ok, Error, LazyCoroResult

# ═══════════════════════════════════════════════════════════════════════════════
# Structured Data — the JSON-like intermediate form
# ═══════════════════════════════════════════════════════════════════════════════

type Structured = (
    str | int | float | bool | None | list[Structured] | dict[str, Structured]
)
"""What json.loads() produces, and what the decoder gives back."""

type StructuredInput = (
    str
    | int
    | float
    | bool
    | None
    | Decimal
    | list[StructuredInput]
    | tuple[StructuredInput, ...]
    | Mapping[str, StructuredInput]
)
"""What the encoder accepts: Structured plus tuples, mappings and Decimals."""

type Path = tuple[str | int, ...]
"""Field names and list indices from the root to a value."""


def render_path(path: Path) -> str:
    """
    Render a path as `$.field[3].other`.

    Example:
        render_path(("items", 2, "name"))  # "$.items[2].name"
    """
    out = "$"
    for part in path:
        if isinstance(part, int):
            out += f"[{part}]"
        else:
            out += f".{part}"
    return out


# ═══════════════════════════════════════════════════════════════════════════════
# Exports
# ═══════════════════════════════════════════════════════════════════════════════

__all__ = (
    # Re-exports from kungfu
    "Result",
    "Ok",
    "Error",
    "LazyCoroResult",
    # Aliases
    "Structured",
    "StructuredInput",
    "Path",
    "render_path",
)
