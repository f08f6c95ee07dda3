"""
Structured-text decoding for cfgload.

Turns the bytes of a config file into a validated record. Every way the
content can be wrong (bad grammar, bad encoding, wrong top-level shape,
unknown or missing fields, mismatched types) maps to the same
DecodeError failure; no partially decoded record ever escapes.
"""

from __future__ import annotations

import os
import tomllib
from enum import Enum
from pathlib import PurePath
from typing import IO, Any, TypeVar

import yaml
from pydantic import BaseModel, ValidationError

from .context import current_encoding, is_strict
from .errors import FailureDescriptor, decode_error
from .result import Failure, Result, Success

M = TypeVar("M", bound=BaseModel)


class TextFormat(Enum):
    """Supported structured-text grammars."""

    YAML = "yaml"
    JSON = "json"
    TOML = "toml"

    @classmethod
    def for_path(cls, path: str | os.PathLike[str]) -> TextFormat:
        """Pick a format from the file suffix; anything unrecognised is YAML."""
        suffix = PurePath(os.fspath(path)).suffix.lower()
        return _SUFFIXES.get(suffix, cls.YAML)


_SUFFIXES = {
    ".json": TextFormat.JSON,
    ".toml": TextFormat.TOML,
    ".yaml": TextFormat.YAML,
    ".yml": TextFormat.YAML,
}

# Errors raised by the parsers and validators for malformed content.
# The YAML and TOML parsers recurse per nesting level, so very deep
# documents surface as RecursionError.
_DECODE_ERRORS = (
    yaml.YAMLError,
    tomllib.TOMLDecodeError,
    UnicodeDecodeError,
    RecursionError,
    ValidationError,
)


def decode(
    data: bytes, model: type[M], fmt: TextFormat = TextFormat.YAML
) -> Result[M, FailureDescriptor]:
    """
    Decode raw file content into an instance of `model`.

    Args:
        data: Entire content of the resource
        model: Target record type (a pydantic model)
        fmt: Grammar of `data`

    Returns:
        Success(record) if parsing and validation both pass
        Failure(DecodeError) otherwise
    """
    return _decode(data, model, fmt)


def decode_text(
    text: str, model: type[M], fmt: TextFormat = TextFormat.YAML
) -> Result[M, FailureDescriptor]:
    """Decode in-memory text; same failure mapping as decode()."""
    return _decode(text, model, fmt)


def read_and_decode(
    handle: IO[bytes], model: type[M], fmt: TextFormat = TextFormat.YAML
) -> Result[M, FailureDescriptor]:
    """Read the whole stream from `handle` and decode it."""
    return decode(handle.read(), model, fmt)


def _decode(
    source: str | bytes, model: type[M], fmt: TextFormat
) -> Result[M, FailureDescriptor]:
    _check_model(model)
    try:
        if fmt is TextFormat.JSON:
            # pydantic reads JSON bytes directly and rejects invalid UTF-8 itself
            record = model.model_validate_json(source, strict=is_strict())
        else:
            if isinstance(source, bytes):
                source = source.decode(current_encoding())
            # Non-mapping documents (scalars, lists) fail model validation
            record = model.model_validate(_parse(source, fmt), strict=is_strict())
    except _DECODE_ERRORS:
        return Failure(decode_error())
    return Success(record)


def _parse(text: str, fmt: TextFormat) -> Any:
    if fmt is TextFormat.TOML:
        return tomllib.loads(text)
    # An empty document is an empty mapping: every field takes its default
    data = yaml.safe_load(text)
    return {} if data is None else data


def _check_model(model: Any) -> None:
    if not (isinstance(model, type) and issubclass(model, BaseModel)):
        raise TypeError(f"Expected a pydantic model class, got {model!r}")
