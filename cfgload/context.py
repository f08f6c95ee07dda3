"""
Context manager for loader configuration (e.g., text encoding, strict mode).
"""

from collections.abc import Iterator
from contextlib import contextmanager
from contextvars import ContextVar

# Context variables for decode settings
_encoding: ContextVar[str] = ContextVar("encoding", default="utf-8")
_strict_mode: ContextVar[bool] = ContextVar("strict_mode", default=True)


def current_encoding() -> str:
    """Text encoding used to decode file bytes before parsing."""
    return _encoding.get()


def is_strict() -> bool:
    """Check if strict type validation is currently enabled."""
    return _strict_mode.get()


@contextmanager
def loader_context(*, encoding: str = "utf-8", strict: bool = True) -> Iterator[None]:
    """
    Context manager for loader configuration.

    Args:
        encoding: Encoding of YAML and TOML files. JSON is always read as UTF-8.
        strict: If False, values may be coerced to the declared field type
               (e.g. "8080" -> 8080). Unknown fields are rejected either way.

    Example:
        from cfgload import load, loader_context

        # Normal: `port: "8080"` is a DecodeError for an int field
        load("service.yaml", Service)

        # Lax: the string is coerced to 8080
        with loader_context(strict=False):
            load("service.yaml", Service)
    """
    encoding_token = _encoding.set(encoding)
    strict_token = _strict_mode.set(strict)
    try:
        yield
    finally:
        _strict_mode.reset(strict_token)
        _encoding.reset(encoding_token)
