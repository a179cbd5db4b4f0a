"""
DynamodeAgent — typed record operations over a StoreClient.

    agent = DynamodeAgent(MemoryClient(tables=["Cars"]))

    await agent.put(car)
    match await agent.get(Car, ("tesla", "model-y")):
        case Ok(found):
            ...  # Car | None
        case Error(e):
            ...  # AgentError; e.retryable only for STORE

Write path:  record → to_structured() → encode_item → put_item
Read path:   get_item/query/scan → decode_item → from_structured() → record

Mapping failures stop the operation before (writes) or instead of (reads)
returning anything; one bad item fails a whole query or scan.
"""

from __future__ import annotations

import logging
from collections.abc import Awaitable, Callable

from combinators import lift as L
from kungfu import Result, Ok, Error, LazyCoroResult

from dynamode.agent._boto3 import Boto3Client
from dynamode.agent._client import StoreClient
from dynamode.agent._errors import AgentError, AgentErrorKind
from dynamode.agent._model import DynamoModel
from dynamode.agent._settings import Settings, get_settings
from dynamode.codec import (
    Policy,
    DEFAULT_POLICY,
    encode_item,
    decode_item,
    build_key,
)
from dynamode.wire._types import Item

logger = logging.getLogger(__name__)

type Keys = tuple[str, str]
"""(partition key, sort key)."""


class DynamodeAgent:
    """
    Record-level access to a store.

    Note: Holds its client explicitly — construct one per store and pass it
    where needed.
    """

    def __init__(self, client: StoreClient, policy: Policy = DEFAULT_POLICY) -> None:
        self._client = client
        self._policy = policy

    @classmethod
    def connect_local(cls, settings: Settings | None = None) -> DynamodeAgent:
        """Agent on DynamoDB Local via boto3."""
        settings = settings or get_settings()
        return cls(Boto3Client.connect_local(settings), policy=settings.policy)

    @property
    def client(self) -> StoreClient:
        return self._client

    @property
    def policy(self) -> Policy:
        return self._policy

    # ═══════════════════════════════════════════════════════════════════════════
    # Mapping
    # ═══════════════════════════════════════════════════════════════════════════

    def _key(self, keys: Keys) -> Result[Item, AgentError]:
        if not isinstance(keys, (tuple, list)) or len(keys) != 2:
            return Error(AgentError(
                AgentErrorKind.INVALID_KEY,
                f"keys must be a (partition, sort) pair, got {keys!r}",
            ))
        try:
            partition, sort = keys
            return Ok(build_key(partition, sort).value)
        except (TypeError, ValueError) as e:
            return Error(AgentError(AgentErrorKind.INVALID_KEY, str(e), e))

    def _to_item(self, record: DynamoModel) -> Result[Item, AgentError]:
        try:
            data = record.to_structured()
        except Exception as e:
            return Error(AgentError(
                AgentErrorKind.SERIALIZATION,
                f"{type(record).__name__}.to_structured() failed: {e}",
                e,
            ))

        match encode_item(data, self._policy):
            case Error(e):
                logger.warning("encode failed for %s: %s", type(record).__name__, e)
                return Error(AgentError(AgentErrorKind.ENCODE, str(e), e))
            case Ok(encoded):
                item = dict(encoded.value)

        try:
            keys = record.partition_sort_key()
        except Exception as e:
            return Error(AgentError(
                AgentErrorKind.INVALID_KEY,
                f"{type(record).__name__}.partition_sort_key() failed: {e}",
                e,
            ))

        match self._key(keys):
            case Error(e):
                return Error(e)
            case Ok(key):
                pass

        # The key wins, but a record may not contradict it
        for name, wire in key.items():
            existing = item.get(name)
            if existing is not None and existing != wire:
                return Error(AgentError(
                    AgentErrorKind.INVALID_KEY,
                    f"field {name!r} is {existing!r} but partition_sort_key() says {wire!r}",
                ))
        item.update(key)
        return Ok(item)

    def _from_item[M: DynamoModel](self, model: type[M], item: Item) -> Result[M, AgentError]:
        match decode_item(item, self._policy):
            case Error(e):
                logger.warning("decode failed for %s: %s", model.__name__, e)
                return Error(AgentError(AgentErrorKind.DECODE, str(e), e))
            case Ok(data):
                pass

        try:
            return Ok(model.from_structured(data))
        except Exception as e:
            return Error(AgentError(
                AgentErrorKind.DESERIALIZATION,
                f"{model.__name__}.from_structured() failed: {e}",
                e,
            ))

    def _from_items[M: DynamoModel](
        self, model: type[M], items: list[Item]
    ) -> Result[list[M], AgentError]:
        records: list[M] = []
        for item in items:
            match self._from_item(model, item):
                case Ok(record):
                    records.append(record)
                case Error(e):
                    return Error(e)
        return Ok(records)

    # ═══════════════════════════════════════════════════════════════════════════
    # Store Calls
    # ═══════════════════════════════════════════════════════════════════════════

    async def _call[T](
        self,
        op: str,
        table: str,
        fn: Callable[[], Awaitable[T]],
    ) -> Result[T, AgentError]:
        logger.debug("%s table=%s", op, table)
        result = await L.catching_async(
            fn,
            on_error=lambda e: AgentError(
                AgentErrorKind.STORE,
                f"{op} on {table} failed: {e}",
                e,
            ),
        )
        match result:
            case Error(e):
                logger.warning("%s", e)
        return result

    # ═══════════════════════════════════════════════════════════════════════════
    # Operations
    # ═══════════════════════════════════════════════════════════════════════════

    def put(self, record: DynamoModel) -> LazyCoroResult[None, AgentError]:
        """
        Write record, overwriting any item with the same key.

        Example:
            result = await agent.put(Car(pk="tesla", sk="model-y", ...))
        """
        table = type(record).table_name()

        async def execute() -> Result[None, AgentError]:
            match self._to_item(record):
                case Error(e):
                    return Error(e)
                case Ok(item):
                    pass

            match await self._call("put_item", table, lambda: self._client.put_item(table, item)):
                case Error(e):
                    return Error(e)
                case Ok(_):
                    return Ok(None)

        return LazyCoroResult(execute)

    def update(self, record: DynamoModel) -> LazyCoroResult[None, AgentError]:
        """Full overwrite — same as put()."""
        return self.put(record)

    def get[M: DynamoModel](
        self, model: type[M], keys: Keys
    ) -> LazyCoroResult[M | None, AgentError]:
        """
        Read one record. Ok(None) if absent.

        Example:
            result = await agent.get(Car, ("tesla", "model-y"))
        """
        table = model.table_name()

        async def execute() -> Result[M | None, AgentError]:
            match self._key(keys):
                case Error(e):
                    return Error(e)
                case Ok(key):
                    pass

            match await self._call("get_item", table, lambda: self._client.get_item(table, key)):
                case Error(e):
                    return Error(e)
                case Ok(None):
                    return Ok(None)
                case Ok(item):
                    return self._from_item(model, item)

        return LazyCoroResult(execute)

    def require[M: DynamoModel](
        self, model: type[M], keys: Keys
    ) -> LazyCoroResult[M, AgentError]:
        """Read one record. NOT_FOUND if absent."""
        async def execute() -> Result[M, AgentError]:
            match await self.get(model, keys):
                case Ok(None):
                    return Error(AgentError(
                        AgentErrorKind.NOT_FOUND,
                        f"{model.__name__} {keys!r} not found",
                    ))
                case Ok(record):
                    return Ok(record)
                case Error(e):
                    return Error(e)

        return LazyCoroResult(execute)

    def delete(self, model: type[DynamoModel], keys: Keys) -> LazyCoroResult[None, AgentError]:
        """Delete one record. Deleting an absent record succeeds."""
        table = model.table_name()

        async def execute() -> Result[None, AgentError]:
            match self._key(keys):
                case Error(e):
                    return Error(e)
                case Ok(key):
                    pass

            match await self._call("delete_item", table, lambda: self._client.delete_item(table, key)):
                case Error(e):
                    return Error(e)
                case Ok(_):
                    return Ok(None)

        return LazyCoroResult(execute)

    def query_by_pk[M: DynamoModel](
        self, model: type[M], partition: str
    ) -> LazyCoroResult[list[M], AgentError]:
        """
        All records under one partition key (e.g. every car for "bmw").

        Example:
            result = await agent.query_by_pk(Car, "bmw")
        """
        table = model.table_name()

        async def execute() -> Result[list[M], AgentError]:
            match await self._call("query", table, lambda: self._client.query(table, partition)):
                case Error(e):
                    return Error(e)
                case Ok(items):
                    return self._from_items(model, items)

        return LazyCoroResult(execute)

    def scan_all[M: DynamoModel](self, model: type[M]) -> LazyCoroResult[list[M], AgentError]:
        """Every record in the table. Admin/debug use."""
        table = model.table_name()

        async def execute() -> Result[list[M], AgentError]:
            match await self._call("scan", table, lambda: self._client.scan(table)):
                case Error(e):
                    return Error(e)
                case Ok(items):
                    return self._from_items(model, items)

        return LazyCoroResult(execute)


__all__ = ("DynamodeAgent", "Keys")
