from __future__ import annotations

import logging

from typing import Any, Generic, TypeVar

from ._errors import InvalidMiddlewareResultError
from ._reducer import (
    MiddlewareFunction,
    ReducerFunction,
    SubscriberFunction,
    Unsubscribe
)
from ._result import Continue, Halt, is_halt, unwrap


A = TypeVar("A")
S = TypeVar("S")


__all__ = (
    "Store",
)


_logger = logging.getLogger(__name__)


def _registration(entries: list, entry: Any) -> Unsubscribe:
    # Each handle removes its own entry once, duplicates included.
    token = [entry]
    entries.append(token)

    def remove() -> None:
        for index, existing in enumerate(entries):
            if existing is token:
                del entries[index]
                return

    return remove


class Store(Generic[S, A]):
    """Single state container updated by dispatching actions.

    ``dispatch`` threads the action through the registered middleware in
    registration order, applies the reducer to the surviving action,
    commits the result as the new state, then notifies subscribers in
    registration order. Everything happens on the caller's stack before
    ``dispatch`` returns; failures from any callable propagate unchanged.

    The middleware chain is captured when a dispatch starts and the
    subscriber list when notification starts, so registrations made from
    inside a dispatch take effect on the next one.
    """

    _reducer: ReducerFunction
    _state: S

    _middleware: list[list[MiddlewareFunction]]
    _subscribers: list[list[SubscriberFunction]]

    def __init__(self, initial_state: S, reducer: ReducerFunction) -> None:
        self._reducer = reducer
        self._state = initial_state

        self._middleware = []
        self._subscribers = []

    @property
    def reducer(self) -> ReducerFunction:
        return self._reducer

    @property
    def state(self) -> S:
        return self._state

    def get_state(self) -> S:
        return self._state

    def _run_middleware(self, action: Any) -> tuple[bool, Any]:
        chain = [token[0] for token in self._middleware]

        for index, middleware in enumerate(chain):
            result = middleware(action)

            if isinstance(result, type) and issubclass(result, (Continue, Halt)):
                raise InvalidMiddlewareResultError(
                    f"Middleware {middleware!r} returned the {result.__name__} "
                    "class instead of an instance"
                )

            if is_halt(result):
                _logger.debug(
                    "Dispatch of %r halted by middleware %d of %d",
                    action,
                    index + 1,
                    len(chain)
                )

                return False, None

            action = unwrap(result)

        return True, action

    def _notify(self, state: S) -> None:
        for subscriber in [token[0] for token in self._subscribers]:
            subscriber(state)

    def dispatch(self, action: A) -> None:
        if self._middleware:
            proceed, action = self._run_middleware(action)

            if not proceed:
                return

        state = self._reducer(self._state, action)
        self._state = state

        self._notify(state)

    def subscribe(self, subscriber: SubscriberFunction) -> Unsubscribe:
        unsubscribe = _registration(self._subscribers, subscriber)

        _logger.debug("Subscribed %r (%d total)", subscriber, len(self._subscribers))

        return unsubscribe

    def add_middleware(self, middleware: MiddlewareFunction) -> Unsubscribe:
        remove = _registration(self._middleware, middleware)

        _logger.debug("Added middleware %r (%d total)", middleware, len(self._middleware))

        return remove
