"""
Result type for cfgload.

Provides a minimal Result type (Success/Failure) and the combinators used to
compose fallible steps without exceptions.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Generic, TypeGuard, TypeVar

from .errors import FailureDescriptor, LoadError

T = TypeVar("T")
U = TypeVar("U")
E = TypeVar("E")


@dataclass(frozen=True, slots=True)
class Success(Generic[T]):
    """Success result containing a value."""

    value: T

    def is_ok(self) -> bool:
        return True

    def is_err(self) -> bool:
        return False


@dataclass(frozen=True, slots=True)
class Failure(Generic[E]):
    """Failure result containing an error descriptor."""

    error: E

    def is_ok(self) -> bool:
        return False

    def is_err(self) -> bool:
        return True


# Type alias
Result = Success[T] | Failure[E]


def chain(result: Result[T, E], step: Callable[[T], Result[U, E]]) -> Result[U, E]:
    """
    Feed a success value into the next fallible step.

    A Failure is returned as-is (same object) and `step` is never called.
    Otherwise the Result produced by `step` is returned directly.

    Usage:
        chain(acquire(path), using(read_all))
    """
    match result:
        case Failure():
            return result
        case Success(value=value):
            return step(value)
    raise TypeError(f"Expected Success or Failure, got {type(result).__name__}")


def map_success(result: Result[T, E], f: Callable[[T], U]) -> Result[U, E]:
    """
    Transform a success value; failures pass through unchanged.

    Usage:
        map_success(load(path, Config), lambda cfg: cfg.name)
    """
    return chain(result, lambda value: Success(f(value)))


def is_success(result: Result[T, Any]) -> TypeGuard[Success[T]]:
    return isinstance(result, Success)


def is_failure(result: Result[Any, E]) -> TypeGuard[Failure[E]]:
    return isinstance(result, Failure)


def unwrap(result: Result[T, FailureDescriptor]) -> T:
    """
    Return the success value or raise LoadError with the failure descriptor.

    This is the explicit hand-off from Result values to exceptions; the
    descriptor is attached to the exception unchanged.
    """
    match result:
        case Success(value=value):
            return value
        case Failure(error=error):
            raise LoadError(error)
    raise TypeError(f"Expected Success or Failure, got {type(result).__name__}")
