"""Shared test fixtures for all hookchain tests."""

import pytest

from hookchain import Dispatcher


def increment(args: dict) -> dict:
    return {**args, "n": args["n"] + 1}


def double(args: dict) -> dict:
    return {**args, "n": args["n"] * 2}


def tracer(order: list, label: str):
    """Return a callback that records *label* and passes args through."""

    def trace(args: dict) -> dict:
        order.append(label)
        return args

    trace.__qualname__ = f"trace_{label}"
    return trace


@pytest.fixture
def dispatcher() -> Dispatcher:
    """Fresh dispatcher per test."""
    return Dispatcher()
