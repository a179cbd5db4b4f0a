"""Shared infrastructure for examples."""

from __future__ import annotations

import asyncio
from collections.abc import Callable, Coroutine
from dataclasses import dataclass

from dynamode.agent import DataclassModel


# Records
@dataclass(slots=True)
class Car(DataclassModel):
    __table_name__ = "Cars"

    pk: str
    sk: str
    brand: str
    model: str
    horsepower: int


# Helpers
def banner(title: str) -> None:
    print(f"\n{'─' * 50}\n{title}\n{'─' * 50}")


def run(main: Callable[[], Coroutine[object, object, None]]) -> None:
    asyncio.run(main())
