"""
Codec — structured data ⇄ DynamoDB attribute values.

    from dynamode import codec as C

    match C.encode_item({"pk": "tesla", "sk": "model-y", "horsepower": 420}):
        case Ok(item):
            ...  # M({"pk": S("tesla"), "sk": S("model-y"), "horsepower": N("420")})
        case Error(e):
            print(e.kind, e.location)

    C.decode_item(item)              # Ok({"pk": "tesla", ...})
    C.build_key("tesla", "model-y")  # M({"pk": S("tesla"), "sk": S("model-y")})

Round trip: decode(encode(v)) == v for every finite structured value.
"""

from dynamode.codec._errors import (
    EncodeError,
    EncodeErrorKind,
    DecodeError,
    DecodeErrorKind,
)
from dynamode.codec._policy import Policy, DEFAULT_POLICY, STORE_MAX_DEPTH, MAX_DEPTH_CEILING
from dynamode.codec._encode import encode, encode_item
from dynamode.codec._decode import decode, decode_item
from dynamode.codec._key import build_key, PARTITION_KEY, SORT_KEY

__all__ = (
    # Errors
    "EncodeError",
    "EncodeErrorKind",
    "DecodeError",
    "DecodeErrorKind",
    # Policy
    "Policy",
    "DEFAULT_POLICY",
    "STORE_MAX_DEPTH",
    "MAX_DEPTH_CEILING",
    # Operations
    "encode",
    "encode_item",
    "decode",
    "decode_item",
    "build_key",
    "PARTITION_KEY",
    "SORT_KEY",
)
