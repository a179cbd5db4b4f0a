"""
Agent — typed records over an in-memory store.

Key concepts:
- Records implement DynamoModel (here via DataclassModel)
- Agent holds its client explicitly; nothing global
- Every operation returns LazyCoroResult[..., AgentError]
- Mapping errors are never retryable; store errors may be

Level 3: dynamode.agent
Level 2: dynamode.codec
Level 1: kungfu.Result
"""

from kungfu import Ok, Error

from dynamode import agent as A
from dynamode import wire as W
from examples._infra import banner, run, Car


agent = A.DynamodeAgent(A.MemoryClient(tables=["Cars"]))


async def main() -> None:
    banner("Agent: CRUD")

    await agent.put(Car("tesla", "model-y", "Tesla", "Model Y", 420))
    await agent.put(Car("bmw", "m3", "BMW", "M3", 473))
    await agent.put(Car("bmw", "m5", "BMW", "M5", 617))

    print("\n1. Get one:")
    match await agent.get(Car, ("tesla", "model-y")):
        case Ok(car):
            print(f"   {car}")
        case Error(e):
            print(f"   error: {e}")

    print("\n2. Query a partition:")
    match await agent.query_by_pk(Car, "bmw"):
        case Ok(cars):
            for car in cars:
                print(f"   {car.model}: {car.horsepower} hp")
        case Error(e):
            print(f"   error: {e}")

    print("\n3. Delete, then require:")
    await agent.delete(Car, ("bmw", "m3"))
    match await agent.require(Car, ("bmw", "m3")):
        case Ok(car):
            print(f"   still there: {car}")
        case Error(e):
            print(f"   {e.kind.name}: {e.message}")

    banner("Agent: Failures")

    print("\n4. A legacy item with a binary field poisons the scan:")
    await agent.client.put_item("Cars", {
        "pk": W.S("audi"),
        "sk": W.S("rs7"),
        "badge": W.B(b"\x89PNG"),
    })
    match await agent.scan_all(Car):
        case Ok(cars):
            print(f"   {len(cars)} cars")
        case Error(e):
            print(f"   {e.kind.name} (retryable={e.retryable}): {e.message}")

    print("\n5. Missing table is a store error:")
    match await A.DynamodeAgent(A.MemoryClient()).scan_all(Car):
        case Ok(_):
            print("   unexpected success")
        case Error(e):
            print(f"   {e.kind.name} (retryable={e.retryable}): {e.message}")

    print("\nDone!")


if __name__ == "__main__":
    run(main)
