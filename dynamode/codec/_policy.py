"""
Codec policy — traversal limits.
"""

from __future__ import annotations

from dataclasses import dataclass

# DynamoDB rejects documents nested deeper than this.
STORE_MAX_DEPTH = 32

# Each nesting level costs two interpreter frames; stay well under the
# default recursion limit of 1000.
MAX_DEPTH_CEILING = 256


@dataclass(frozen=True, slots=True)
class Policy:
    """
    Codec configuration.

    max_depth: how many containers (lists/maps) may nest, counting the item
    root. Deeper input fails with MAX_DEPTH_EXCEEDED instead of recursing.
    Must lie in 1..MAX_DEPTH_CEILING.

    Example:
        policy = Policy().with_max_depth(8)
        result = encode_item(doc, policy)

    Note: Immutable — each method returns new Policy.
    """

    max_depth: int = STORE_MAX_DEPTH

    def __post_init__(self) -> None:
        if not 1 <= self.max_depth <= MAX_DEPTH_CEILING:
            raise ValueError(
                f"max_depth must be between 1 and {MAX_DEPTH_CEILING}, got {self.max_depth}"
            )

    def with_max_depth(self, depth: int) -> Policy:
        """
        Set the nesting limit.

        Example:
            .with_max_depth(4)
        """
        return Policy(max_depth=depth)


DEFAULT_POLICY = Policy()


__all__ = (
    "STORE_MAX_DEPTH",
    "MAX_DEPTH_CEILING",
    "Policy",
    "DEFAULT_POLICY",
)
