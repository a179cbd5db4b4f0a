"""
Codec — structured data ⇄ DynamoDB attribute values.

Key concepts:
- encode_item: dict → M (root must be a mapping)
- decode_item: M → dict (root must be a map)
- Errors are values: match on Ok / Error, read kind and location

Level 2: dynamode.codec
Level 1: kungfu.Result
"""

import json

from kungfu import Ok, Error

from dynamode import codec as C
from dynamode import wire as W
from examples._infra import banner


def show(label: str, result: object) -> None:
    match result:
        case Ok(value):
            print(f"   {label}: {value!r}")
        case Error(e):
            print(f"   {label}: {e}")


def main() -> None:
    banner("Codec: Round Trip")

    car = {"pk": "tesla", "sk": "model-y", "brand": "Tesla", "model": "Model Y", "horsepower": 420}

    match C.encode_item(car):
        case Ok(item):
            print("\n1. Encoded (DynamoDB JSON):")
            print("   " + json.dumps(W.item_to_json(item.value)))
            print("\n2. Decoded back:")
            show("decode_item", C.decode_item(item))
        case Error(e):
            print(f"   unexpected: {e}")

    print("\n3. Integers stay integers, floats stay floats:")
    show("473", C.encode(473))
    show("473.0", C.encode(473.0))
    show("N('473')", C.decode(W.N("473")))

    banner("Codec: Failures")

    print()
    show("NaN inside a list", C.encode_item({"readings": [1.5, float("nan")]}))
    show("bare list as item", C.encode_item([1, 2, 3]))
    show("binary value", C.decode_item({"blob": W.B(b"\x00\x01")}))
    show("bad number text", C.decode(W.N("12abc")))

    deep: dict = {}
    cursor = deep
    for _ in range(40):
        cursor["next"] = {}
        cursor = cursor["next"]
    show("40 levels deep", C.encode_item(deep))

    print("\nDone!")


if __name__ == "__main__":
    main()
