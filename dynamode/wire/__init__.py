"""
Wire — DynamoDB attribute values.

    from dynamode import wire as W

    item = W.M({"pk": W.S("tesla"), "horsepower": W.N("420")})
    W.item_to_json(item.value)  # {"pk": {"S": "tesla"}, "horsepower": {"N": "420"}}
"""

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
    WireValue,
    Item,
    VARIANTS,
    BY_TAG,
)
from dynamode.wire._json import (
    WireFormatError,
    to_json,
    item_to_json,
    from_json,
    item_from_json,
)

__all__ = (
    # Variants
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
    # DynamoDB JSON
    "WireFormatError",
    "to_json",
    "item_to_json",
    "from_json",
    "item_from_json",
)
