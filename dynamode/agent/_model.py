"""
Model protocol — what the agent needs from a record type.

The codec only ever sees structured data. Turning a record into structured
data and back is the record's job.
"""

from __future__ import annotations

import dataclasses
from typing import Any, ClassVar, Protocol, Self, runtime_checkable

from dynamode._types import Structured
from dynamode.codec._key import PARTITION_KEY, SORT_KEY

# ═══════════════════════════════════════════════════════════════════════════════
# DynamoModel Protocol — Users Implement This
# ═══════════════════════════════════════════════════════════════════════════════


@runtime_checkable
class DynamoModel(Protocol):
    """
    A record stored as one item.

    Example:
        @dataclass
        class Car:
            pk: str
            sk: str
            horsepower: int

            @classmethod
            def table_name(cls) -> str:
                return "Cars"

            def partition_sort_key(self) -> tuple[str, str]:
                return (self.pk, self.sk)

            def to_structured(self) -> Structured:
                return {"pk": self.pk, "sk": self.sk, "horsepower": self.horsepower}

            @classmethod
            def from_structured(cls, data: Structured) -> Car:
                return cls(**data)
    """

    @classmethod
    def table_name(cls) -> str:
        """Table holding this record type."""
        ...

    def partition_sort_key(self) -> tuple[str, str]:
        """(partition key, sort key) identifying this record."""
        ...

    def to_structured(self) -> Structured:
        """Record fields as structured data (a mapping)."""
        ...

    @classmethod
    def from_structured(cls, data: Structured) -> Self:
        """Rebuild a record from decoded fields. May raise on bad data."""
        ...


# ═══════════════════════════════════════════════════════════════════════════════
# DataclassModel — Protocol Implementation for Dataclasses
# ═══════════════════════════════════════════════════════════════════════════════


class DataclassModel:
    """
    DynamoModel for dataclasses with `pk` and `sk` fields.

    Example:
        @dataclass
        class Car(DataclassModel):
            __table_name__ = "Cars"

            pk: str
            sk: str
            brand: str
            horsepower: int

    Note: Loading ignores unknown fields and is shallow: nested values stay
    dicts/lists.
    """

    __table_name__: ClassVar[str]

    @classmethod
    def table_name(cls) -> str:
        return cls.__table_name__

    def partition_sort_key(self) -> tuple[str, str]:
        return (getattr(self, PARTITION_KEY), getattr(self, SORT_KEY))

    def to_structured(self) -> Structured:
        return dataclasses.asdict(self)  # type: ignore[call-overload]

    @classmethod
    def from_structured(cls, data: Structured) -> Self:
        if not isinstance(data, dict):
            raise TypeError(f"{cls.__name__} needs a dict, got {type(data).__name__}")
        names = {f.name for f in dataclasses.fields(cls) if f.init}  # type: ignore[arg-type]
        kwargs: dict[str, Any] = {k: v for k, v in data.items() if k in names}
        return cls(**kwargs)


__all__ = ("DynamoModel", "DataclassModel")
