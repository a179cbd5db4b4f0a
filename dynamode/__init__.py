"""
dynamode — JSON-like data in and out of DynamoDB.

    from dynamode import codec as C  # Structured data ⇄ attribute values
    from dynamode import wire as W   # Attribute value types, DynamoDB JSON
    from dynamode import agent as A  # Typed records over a store client

The agent is imported on demand; the codec needs nothing but kungfu.
"""

from dynamode import wire
from dynamode import codec
from dynamode._types import (
    Result,
    Ok,
    Error,
    Structured,
    StructuredInput,
)
from dynamode.codec import (
    encode,
    encode_item,
    decode,
    decode_item,
    build_key,
    EncodeError,
    EncodeErrorKind,
    DecodeError,
    DecodeErrorKind,
    Policy,
)

__version__ = "0.1.0"

__all__ = (
    "wire",
    "codec",
    "Result",
    "Ok",
    "Error",
    "Structured",
    "StructuredInput",
    "encode",
    "encode_item",
    "decode",
    "decode_item",
    "build_key",
    "EncodeError",
    "EncodeErrorKind",
    "DecodeError",
    "DecodeErrorKind",
    "Policy",
)
