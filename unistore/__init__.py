from __future__ import annotations

from typing import Iterable, TypeVar

from ._errors import InvalidMiddlewareResultError, StoreError
from ._reducer import (
    Middleware,
    MiddlewareFunction,
    MiddlewareResult,
    Reducer,
    ReducerFunction,
    Subscriber,
    SubscriberFunction,
    Unsubscribe
)
from ._result import Continue, Halt
from ._store import Store


__all__ = (
    "Continue",
    "Halt",
    "InvalidMiddlewareResultError",
    "Middleware",
    "MiddlewareFunction",
    "MiddlewareResult",
    "Reducer",
    "ReducerFunction",
    "Store",
    "StoreError",
    "Subscriber",
    "SubscriberFunction",
    "Unsubscribe",

    "create_store"
)


A = TypeVar("A")
S = TypeVar("S")


def create_store(
    reducer: ReducerFunction,
    initial_state: S,
    middleware: Iterable[MiddlewareFunction] = (),
    subscribers: Iterable[SubscriberFunction] = ()
) -> Store[S, A]:
    store: Store[S, A] = Store(initial_state, reducer)

    for callable in middleware:
        store.add_middleware(callable)

    for subscriber in subscribers:
        store.subscribe(subscriber)

    return store
