from __future__ import annotations

from typing import Any, Generic, Optional, TypeVar

from pydantic import BaseModel, ConfigDict


A = TypeVar("A")


__all__ = (
    "Continue",
    "Halt",
)


class Continue(BaseModel, Generic[A]):
    """Explicitly forward ``action`` to the next stage, even when it is ``None``."""

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    action: A


class Halt(BaseModel):
    model_config = ConfigDict(frozen=True)

    reason: Optional[str] = None


def is_halt(result: Any) -> bool:
    return result is None or isinstance(result, Halt)


def unwrap(result: Any) -> Any:
    if isinstance(result, Continue):
        return result.action

    return result
