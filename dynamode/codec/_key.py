"""
Key construction — the (pk, sk) pair as a wire map.

Keys never go through encode_item: a key is exactly two strings.
"""

from __future__ import annotations

from dynamode.wire._types import S, M

PARTITION_KEY = "pk"
SORT_KEY = "sk"


def build_key(partition: str, sort: str) -> M:
    """
    Build the key map for keyed operations (get, delete).

    Example:
        build_key("audi", "rs7")  # M({"pk": S("audi"), "sk": S("rs7")})
    """
    for name, part in ((PARTITION_KEY, partition), (SORT_KEY, sort)):
        if not isinstance(part, str):
            raise TypeError(f"{name} must be str, got {type(part).__name__}")
    return M({PARTITION_KEY: S(partition), SORT_KEY: S(sort)})


__all__ = ("PARTITION_KEY", "SORT_KEY", "build_key")
