from __future__ import annotations

import asyncio
from dataclasses import dataclass, field

from dynamode.agent import (
    AgentErrorKind,
    DataclassModel,
    DynamodeAgent,
    MemoryClient,
    TableNotFound,
)
from dynamode.codec import DecodeErrorKind, EncodeErrorKind, Policy
from dynamode.wire import S, N, NULL, L, B, Item

from helpers import expect_ok, expect_error


@dataclass
class Car(DataclassModel):
    __table_name__ = "Cars"

    pk: str
    sk: str
    brand: str
    model: str
    horsepower: float
    options: list = field(default_factory=list)
    notes: str | None = None


@dataclass
class Garage(DataclassModel):
    """Keyed by its own fields rather than pk/sk."""

    __table_name__ = "Garages"

    city: str
    name: str

    def partition_sort_key(self) -> tuple[str, str]:
        return (self.city, self.name)


@dataclass
class Impostor(DataclassModel):
    __table_name__ = "Cars"

    pk: str
    sk: str

    def partition_sort_key(self) -> tuple[str, str]:
        return ("someone", "else")


@dataclass
class Broken(DataclassModel):
    __table_name__ = "Cars"

    pk: str
    sk: str

    def to_structured(self):
        raise RuntimeError("cannot serialize")


class CountingClient(MemoryClient):
    def __init__(self, tables=()) -> None:
        super().__init__(tables)
        self.puts = 0

    async def put_item(self, table: str, item: Item) -> None:
        self.puts += 1
        await super().put_item(table, item)


def make_agent(**kwargs) -> tuple[DynamodeAgent, CountingClient]:
    client = CountingClient(tables=["Cars", "Garages"])
    return DynamodeAgent(client, **kwargs), client


def tesla(**overrides) -> Car:
    fields = dict(pk="tesla", sk="model-y", brand="Tesla", model="Model Y", horsepower=420)
    fields.update(overrides)
    return Car(**fields)


def test_put_then_get():
    async def _run():
        agent, client = make_agent()
        car = tesla(options=["tow hitch", {"seats": 7}])

        expect_ok(await agent.put(car))
        assert client.puts == 1

        got = expect_ok(await agent.get(Car, ("tesla", "model-y")))
        assert got == car
        assert isinstance(got.horsepower, int)

    asyncio.run(_run())


def test_stored_item_shape():
    async def _run():
        agent, client = make_agent()
        expect_ok(await agent.put(tesla()))

        item = await client.get_item("Cars", {"pk": S("tesla"), "sk": S("model-y")})
        assert item is not None
        assert item["horsepower"] == N("420")
        assert item["options"] == L(())
        assert item["notes"] == NULL(True)

    asyncio.run(_run())


def test_null_field_round_trips_as_none():
    async def _run():
        agent, _ = make_agent()
        expect_ok(await agent.put(tesla(notes=None)))
        got = expect_ok(await agent.get(Car, ("tesla", "model-y")))
        assert got.notes is None

    asyncio.run(_run())


def test_get_missing_is_none_and_require_is_not_found():
    async def _run():
        agent, _ = make_agent()
        assert expect_ok(await agent.get(Car, ("audi", "rs7"))) is None

        err = expect_error(await agent.require(Car, ("audi", "rs7")))
        assert err.kind is AgentErrorKind.NOT_FOUND
        assert not err.retryable

    asyncio.run(_run())


def test_update_overwrites():
    async def _run():
        agent, _ = make_agent()
        expect_ok(await agent.put(tesla()))
        expect_ok(await agent.update(tesla(horsepower=456)))

        got = expect_ok(await agent.require(Car, ("tesla", "model-y")))
        assert got.horsepower == 456

    asyncio.run(_run())


def test_delete():
    async def _run():
        agent, _ = make_agent()
        expect_ok(await agent.put(tesla()))
        expect_ok(await agent.delete(Car, ("tesla", "model-y")))
        assert expect_ok(await agent.get(Car, ("tesla", "model-y"))) is None
        # absent is fine
        expect_ok(await agent.delete(Car, ("tesla", "model-y")))

    asyncio.run(_run())


def test_query_by_pk_and_scan():
    async def _run():
        agent, _ = make_agent()
        expect_ok(await agent.put(tesla()))
        expect_ok(await agent.put(Car("bmw", "m5", "BMW", "M5", 617)))
        expect_ok(await agent.put(Car("bmw", "m3", "BMW", "M3", 473)))

        bmws = expect_ok(await agent.query_by_pk(Car, "bmw"))
        assert [c.sk for c in bmws] == ["m3", "m5"]

        assert expect_ok(await agent.query_by_pk(Car, "audi")) == []

        everything = expect_ok(await agent.scan_all(Car))
        assert {(c.pk, c.sk) for c in everything} == {
            ("tesla", "model-y"),
            ("bmw", "m3"),
            ("bmw", "m5"),
        }

    asyncio.run(_run())


def test_key_is_merged_into_item():
    async def _run():
        agent, client = make_agent()
        expect_ok(await agent.put(Garage("berlin", "north")))

        item = await client.get_item("Garages", {"pk": S("berlin"), "sk": S("north")})
        assert item is not None
        assert item["city"] == S("berlin")

        got = expect_ok(await agent.get(Garage, ("berlin", "north")))
        assert got == Garage("berlin", "north")

    asyncio.run(_run())


def test_contradicting_key_is_rejected_before_write():
    async def _run():
        agent, client = make_agent()
        err = expect_error(await agent.put(Impostor("tesla", "model-y")))
        assert err.kind is AgentErrorKind.INVALID_KEY
        assert client.puts == 0

    asyncio.run(_run())


def test_encode_failure_aborts_before_write():
    async def _run():
        agent, client = make_agent()
        err = expect_error(await agent.put(tesla(horsepower=float("nan"))))

        assert err.kind is AgentErrorKind.ENCODE
        assert err.is_mapping_error
        assert not err.retryable
        assert err.cause.kind is EncodeErrorKind.UNREPRESENTABLE_NUMBER
        assert err.cause.path == ("horsepower",)
        assert client.puts == 0

    asyncio.run(_run())


def test_depth_policy_applies_to_records():
    async def _run():
        agent, client = make_agent(policy=Policy().with_max_depth(2))
        err = expect_error(await agent.put(tesla(options=[[["too deep"]]])))
        assert err.kind is AgentErrorKind.ENCODE
        assert err.cause.kind is EncodeErrorKind.MAX_DEPTH_EXCEEDED
        assert client.puts == 0

    asyncio.run(_run())


def test_serialization_failure():
    async def _run():
        agent, client = make_agent()
        err = expect_error(await agent.put(Broken("a", "b")))
        assert err.kind is AgentErrorKind.SERIALIZATION
        assert isinstance(err.cause, RuntimeError)
        assert client.puts == 0

    asyncio.run(_run())


def test_bad_item_aborts_whole_scan():
    async def _run():
        agent, client = make_agent()
        expect_ok(await agent.put(tesla()))
        # written by some other producer
        await client.put_item("Cars", {"pk": S("audi"), "sk": S("rs7"), "badge": B(b"\x89PNG")})

        err = expect_error(await agent.scan_all(Car))
        assert err.kind is AgentErrorKind.DECODE
        assert err.cause.kind is DecodeErrorKind.UNSUPPORTED_VARIANT
        assert err.cause.detail == "B"
        assert err.cause.path == ("badge",)

        err = expect_error(await agent.query_by_pk(Car, "audi"))
        assert err.kind is AgentErrorKind.DECODE

    asyncio.run(_run())


def test_deserialization_failure():
    async def _run():
        agent, client = make_agent()
        await client.put_item("Cars", {"pk": S("audi"), "sk": S("rs7")})

        err = expect_error(await agent.get(Car, ("audi", "rs7")))
        assert err.kind is AgentErrorKind.DESERIALIZATION
        assert isinstance(err.cause, TypeError)

    asyncio.run(_run())


def test_store_failure_is_retryable():
    async def _run():
        agent = DynamodeAgent(MemoryClient())
        err = expect_error(await agent.put(tesla()))
        assert err.kind is AgentErrorKind.STORE
        assert err.retryable
        assert not err.is_mapping_error
        assert isinstance(err.cause, TableNotFound)

        err = expect_error(await agent.scan_all(Car))
        assert err.kind is AgentErrorKind.STORE

    asyncio.run(_run())


def test_invalid_keys_on_read():
    async def _run():
        agent, _ = make_agent()
        err = expect_error(await agent.get(Car, ("tesla", None)))  # type: ignore[arg-type]
        assert err.kind is AgentErrorKind.INVALID_KEY

        err = expect_error(await agent.delete(Car, ("only-one",)))  # type: ignore[arg-type]
        assert err.kind is AgentErrorKind.INVALID_KEY

    asyncio.run(_run())


def test_key_must_be_a_pair_not_any_iterable():
    async def _run():
        agent, _ = make_agent()
        expect_ok(await agent.put(Car("a", "b", "Audi", "A4", 150)))

        # a two-character string unpacks into ("a", "b") but is not a key
        err = expect_error(await agent.get(Car, "ab"))  # type: ignore[arg-type]
        assert err.kind is AgentErrorKind.INVALID_KEY

        err = expect_error(await agent.delete(Car, {"a": 1, "b": 2}))  # type: ignore[arg-type]
        assert err.kind is AgentErrorKind.INVALID_KEY

        assert expect_ok(await agent.get(Car, ["a", "b"])) is not None  # type: ignore[arg-type]

    asyncio.run(_run())


def test_operations_are_lazy():
    async def _run():
        agent, client = make_agent()
        pending = agent.put(tesla())
        assert client.puts == 0
        expect_ok(await pending)
        assert client.puts == 1

    asyncio.run(_run())
