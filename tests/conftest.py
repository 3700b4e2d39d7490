from __future__ import annotations

from typing import Any

import pytest

from unistore import Store


INCREMENT = "INCREMENT"
DECREMENT = "DECREMENT"


def counter_reducer(state: dict[str, int], action: Any) -> dict[str, int]:
    if action == INCREMENT:
        return {"counter": state["counter"] + 1}

    if action == DECREMENT:
        return {"counter": state["counter"] - 1}

    return state


@pytest.fixture
def store() -> Store[dict[str, int], str]:
    return Store({"counter": 0}, counter_reducer)
