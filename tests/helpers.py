from __future__ import annotations

from typing import Any

import pytest
from kungfu import Ok, Error


def expect_ok(result: Any) -> Any:
    match result:
        case Ok(value):
            return value
        case Error(e):
            pytest.fail(f"expected Ok, got Error({e!r})")
        case _:
            pytest.fail(f"not a Result: {result!r}")


def expect_error(result: Any) -> Any:
    match result:
        case Error(e):
            return e
        case Ok(value):
            pytest.fail(f"expected Error, got Ok({value!r})")
        case _:
            pytest.fail(f"not a Result: {result!r}")


def assert_identical(left: Any, right: Any) -> None:
    """Equal and of the same types all the way down (473 is not 473.0)."""
    assert type(left) is type(right), f"{left!r} vs {right!r}"
    if isinstance(left, dict):
        assert left.keys() == right.keys()
        for k in left:
            assert_identical(left[k], right[k])
    elif isinstance(left, list):
        assert len(left) == len(right)
        for a, b in zip(left, right):
            assert_identical(a, b)
    else:
        assert left == right


def nested_lists(depth: int) -> list[Any]:
    root: list[Any] = []
    cursor = root
    for _ in range(depth - 1):
        inner: list[Any] = []
        cursor.append(inner)
        cursor = inner
    return root
