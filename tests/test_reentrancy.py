from __future__ import annotations

from typing import Any

from unistore import Store

from conftest import DECREMENT, INCREMENT


def test_nested_dispatch_completes_before_outer_continues(store: Store) -> None:
    events: list[Any] = []

    def first(state: Any) -> None:
        events.append(("first", state["counter"]))

        if state["counter"] == 1:
            store.dispatch(INCREMENT)

    def second(state: Any) -> None:
        events.append(("second", state["counter"], store.get_state()["counter"]))

    store.subscribe(first)
    store.subscribe(second)

    store.dispatch(INCREMENT)

    assert events == [
        ("first", 1),
        ("first", 2),
        ("second", 2, 2),
        ("second", 1, 2),
    ]
    assert store.get_state() == {"counter": 2}


def test_dispatch_from_middleware(store: Store) -> None:
    def echo(action: Any) -> Any:
        if action == DECREMENT:
            store.dispatch(INCREMENT)

        return action

    store.add_middleware(echo)

    store.dispatch(DECREMENT)

    assert store.get_state() == {"counter": 0}


def test_subscriber_added_during_notification_waits(store: Store) -> None:
    late: list[int] = []

    def register(state: Any) -> None:
        if state["counter"] == 1:
            store.subscribe(lambda state: late.append(state["counter"]))

    store.subscribe(register)

    store.dispatch(INCREMENT)
    assert late == []

    store.dispatch(INCREMENT)
    assert late == [2]


def test_subscriber_removed_during_notification_still_runs(store: Store) -> None:
    calls: list[int] = []
    handles: list[Any] = []

    store.subscribe(lambda state: handles[0]())
    handles.append(store.subscribe(lambda state: calls.append(state["counter"])))

    store.dispatch(INCREMENT)
    store.dispatch(INCREMENT)

    assert calls == [1]


def test_middleware_added_during_dispatch_applies_next_time(store: Store) -> None:
    def swap(action: Any) -> Any:
        return DECREMENT if action == INCREMENT else INCREMENT

    added: list[bool] = []

    def installer(action: Any) -> Any:
        if not added:
            store.add_middleware(swap)
            added.append(True)

        return action

    store.add_middleware(installer)

    store.dispatch(INCREMENT)
    assert store.get_state() == {"counter": 1}

    store.dispatch(INCREMENT)
    assert store.get_state() == {"counter": 0}
