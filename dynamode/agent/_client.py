"""
Store client — the network side, behind a protocol.

StoreClient speaks wire items. It knows nothing of records or structured
data; the agent does the mapping.
"""

from __future__ import annotations

import asyncio
from collections.abc import Iterable
from typing import Protocol

from dynamode.codec._key import PARTITION_KEY, SORT_KEY
from dynamode.wire._types import S, Item

# ═══════════════════════════════════════════════════════════════════════════════
# StoreClient Protocol — Users Implement This
# ═══════════════════════════════════════════════════════════════════════════════


class StoreClient(Protocol):
    """
    Async store protocol.

    Implementations raise on failure (throttling, connectivity, missing
    table); the agent turns any exception into a STORE error.
    """

    async def put_item(self, table: str, item: Item) -> None:
        """Write item, overwriting any item with the same key."""
        ...

    async def get_item(self, table: str, key: Item) -> Item | None:
        """Read one item. Returns None if absent."""
        ...

    async def delete_item(self, table: str, key: Item) -> None:
        """Delete one item. Absent items are not an error."""
        ...

    async def query(self, table: str, partition: str) -> list[Item]:
        """All items whose pk equals partition, in sort key order."""
        ...

    async def scan(self, table: str) -> list[Item]:
        """Every item in the table."""
        ...


# ═══════════════════════════════════════════════════════════════════════════════
# Memory Client — For Testing
# ═══════════════════════════════════════════════════════════════════════════════


class TableNotFound(LookupError):
    """Raised for operations on a table that was never created."""


class MemoryClient:
    """
    In-memory store client.

    Note: Tables must be created up front, like the real service.
    Sort key order is plain string order.
    """

    def __init__(self, tables: Iterable[str] = ()) -> None:
        self._tables: dict[str, dict[tuple[str, str], Item]] = {}
        self._lock = asyncio.Lock()
        for name in tables:
            self.create_table(name)

    def create_table(self, name: str) -> None:
        self._tables.setdefault(name, {})

    @property
    def table_names(self) -> list[str]:
        return sorted(self._tables)

    def _table(self, name: str) -> dict[tuple[str, str], Item]:
        table = self._tables.get(name)
        if table is None:
            raise TableNotFound(f"Requested resource not found: {name}")
        return table

    @staticmethod
    def _key_of(item: Item) -> tuple[str, str]:
        parts: list[str] = []
        for name in (PARTITION_KEY, SORT_KEY):
            match item.get(name):
                case S(value):
                    parts.append(value)
                case None:
                    raise ValueError(f"Missing the key {name} in the item")
                case other:
                    tag = getattr(other, "TAG", type(other).__name__)
                    raise ValueError(f"Key {name} must be S, got {tag}")
        return (parts[0], parts[1])

    async def put_item(self, table: str, item: Item) -> None:
        async with self._lock:
            self._table(table)[self._key_of(item)] = dict(item)

    async def get_item(self, table: str, key: Item) -> Item | None:
        async with self._lock:
            found = self._table(table).get(self._key_of(key))
            return dict(found) if found is not None else None

    async def delete_item(self, table: str, key: Item) -> None:
        async with self._lock:
            self._table(table).pop(self._key_of(key), None)

    async def query(self, table: str, partition: str) -> list[Item]:
        async with self._lock:
            rows = self._table(table)
            return [
                dict(rows[k])
                for k in sorted(rows)
                if k[0] == partition
            ]

    async def scan(self, table: str) -> list[Item]:
        async with self._lock:
            return [dict(item) for item in self._table(table).values()]


__all__ = ("StoreClient", "TableNotFound", "MemoryClient")
