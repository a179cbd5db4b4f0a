"""
Agent errors — mapping failures and store failures, kept apart.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, auto

from dynamode.codec._errors import EncodeError, DecodeError


class AgentErrorKind(Enum):
    """Kinds of agent errors."""

    ENCODE = auto()  # Record fields did not encode; cause is EncodeError
    DECODE = auto()  # Stored item did not decode; cause is DecodeError
    SERIALIZATION = auto()  # Record.to_structured() raised
    DESERIALIZATION = auto()  # Record.from_structured() raised
    STORE = auto()  # Network / service failure
    NOT_FOUND = auto()  # require() found nothing
    INVALID_KEY = auto()  # Item pk/sk disagree with partition_sort_key()


@dataclass(frozen=True, slots=True)
class AgentError:
    """
    Agent operation error.

    Note: cause holds the codec error for ENCODE/DECODE and the raised
    exception for SERIALIZATION/DESERIALIZATION/STORE.
    Only STORE errors are worth retrying; a mapping error fails the same way
    every time.
    """

    kind: AgentErrorKind
    message: str
    cause: EncodeError | DecodeError | Exception | None = None

    @property
    def retryable(self) -> bool:
        return self.kind is AgentErrorKind.STORE

    @property
    def is_mapping_error(self) -> bool:
        return self.kind in (AgentErrorKind.ENCODE, AgentErrorKind.DECODE)

    def __str__(self) -> str:
        return f"{self.kind.name}: {self.message}"


__all__ = ("AgentErrorKind", "AgentError")
