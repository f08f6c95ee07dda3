"""
Load a config file into a typed record.

load() is the whole pipeline: acquire the path, decode its content with the
handle scoped to the decode step, and return the record or the first failure.
"""

from __future__ import annotations

import logging
import os
from typing import TypeVar

from pydantic import BaseModel

from .codec import TextFormat, read_and_decode
from .errors import FailureDescriptor, LoadError
from .resource import Opener, acquire, using
from .result import Result, chain, unwrap

log = logging.getLogger(__name__)

M = TypeVar("M", bound=BaseModel)


def load(
    path: str | os.PathLike[str],
    model: type[M],
    *,
    fmt: TextFormat | None = None,
    opener: Opener | None = None,
) -> Result[M, FailureDescriptor]:
    """
    Open `path`, decode it into `model`, and close it again.

    Args:
        path: File to load
        model: Target record type
        fmt: Grammar of the file (default: picked from the suffix, else YAML)
        opener: Replacement for the builtin `open` (used by tests)

    Returns:
        Success(record) on success
        Failure(ResourceUnavailable) if the file cannot be opened
        Failure(DecodeError) if the content does not decode into `model`

    Usage:
        Guideline = record_model("Guideline", {"field": str})
        match load("valid.cfg", Guideline):
            case Success(value=cfg):
                print(cfg.field)
            case Failure(error=err):
                print(err.message)
    """
    fmt = fmt or TextFormat.for_path(path)
    return chain(
        acquire(path, opener),
        using(lambda handle: read_and_decode(handle, model, fmt)),
    )


def load_or_raise(
    path: str | os.PathLike[str],
    model: type[M],
    *,
    fmt: TextFormat | None = None,
    opener: Opener | None = None,
) -> M:
    """
    Like load(), but return the record directly.

    Raises:
        LoadError: carrying the failure descriptor unchanged
    """
    try:
        record = unwrap(load(path, model, fmt=fmt, opener=opener))
    except LoadError as e:
        log.debug("Config load failed for %s: %s", path, e.descriptor)
        raise
    log.debug("Loaded %s from %s", model.__name__, path)
    return record
