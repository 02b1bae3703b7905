"""Success/failure container returned by every fallible call to the API.

Callers branch on ``is_success`` before reading ``value`` or ``error``.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import ClassVar, Generic, TypeVar, Union

T = TypeVar("T")
E = TypeVar("E")


@dataclass(frozen=True)
class Success(Generic[T]):
    """Successful outcome carrying a value."""
    value: T
    is_success: ClassVar[bool] = True


@dataclass(frozen=True)
class Failure(Generic[E]):
    """Failed outcome carrying an error."""
    error: E
    is_success: ClassVar[bool] = False


Result = Union[Success[T], Failure[E]]


def success(value: T) -> Success[T]:
    return Success(value)


def failure(error: E) -> Failure[E]:
    return Failure(error)
