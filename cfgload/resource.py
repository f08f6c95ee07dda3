"""
Scoped resource acquisition for cfgload.

acquire() opens a path read-only and returns the handle inside a Result;
using() wraps a step so the handle is closed when the step exits, whichever
way it exits.
"""

from __future__ import annotations

import os
from typing import IO, Callable, TypeVar

from .errors import FailureDescriptor, resource_unavailable
from .result import Failure, Result, Success

T = TypeVar("T")

Opener = Callable[[str | os.PathLike[str], str], IO[bytes]]


def acquire(
    path: str | os.PathLike[str], opener: Opener | None = None
) -> Result[IO[bytes], FailureDescriptor]:
    """
    Open `path` for binary, read-only access.

    Args:
        path: Filesystem location to open
        opener: Replacement for the builtin `open(path, mode)`

    Returns:
        Success(handle) if the open succeeded
        Failure(ResourceUnavailable) for an empty path or any OSError
    """
    if not os.fspath(path):
        return Failure(resource_unavailable(repr(path), "empty path"))

    open_ = opener or open
    try:
        handle = open_(path, "rb")
    except OSError as e:
        return Failure(resource_unavailable(path, e.strerror or str(e)))
    return Success(handle)


def using(
    step: Callable[[IO[bytes]], Result[T, FailureDescriptor]],
) -> Callable[[IO[bytes]], Result[T, FailureDescriptor]]:
    """
    Scope a handle to a single step.

    The returned function runs `step(handle)` inside a `with` block, so the
    handle is closed exactly once on success, on a Failure result, and on an
    exception escaping `step`.

    Usage:
        chain(acquire(path), using(lambda fh: Success(fh.read())))
    """

    def scoped(handle: IO[bytes]) -> Result[T, FailureDescriptor]:
        with handle:
            return step(handle)

    return scoped
