from typing import Callable, Generic, Optional, TypeVar, Union

from ._result import Continue, Halt


A = TypeVar("A")
S = TypeVar("S")


__all__ = (
    "Middleware",
    "MiddlewareFunction",
    "MiddlewareResult",
    "Reducer",
    "ReducerFunction",
    "Subscriber",
    "SubscriberFunction",
    "Unsubscribe",
)


MiddlewareResult = Union[A, Continue[A], Halt, None]

ReducerFunction = Callable[[S, A], S]
MiddlewareFunction = Callable[[A], MiddlewareResult]
SubscriberFunction = Callable[[S], None]
Unsubscribe = Callable[[], None]


class Reducer(Generic[S, A]):
    def apply(self, state: S, action: A) -> S:
        raise NotImplementedError

    def __call__(self, state: S, action: A) -> S:
        return self.apply(state, action)


class Middleware(Generic[A]):
    """Chain stage that may rewrite or cancel an action.

    ``process`` returns the action for the next stage, ``None`` or a
    :class:`Halt` to cancel the dispatch, or a :class:`Continue` wrapping
    the next action.
    """

    def process(self, action: A) -> Optional[MiddlewareResult]:
        raise NotImplementedError

    def __call__(self, action: A) -> Optional[MiddlewareResult]:
        return self.process(action)


class Subscriber(Generic[S]):
    def notify(self, state: S) -> None:
        raise NotImplementedError

    def __call__(self, state: S) -> None:
        self.notify(state)
