import logging

from .codec import TextFormat, decode, decode_text
from .context import loader_context
from .errors import FailureDescriptor, FailureKind, LoadError
from .loader import load, load_or_raise
from .resource import acquire, using
from .result import (
    Failure,
    Result,
    Success,
    chain,
    is_failure,
    is_success,
    map_success,
    unwrap,
)
from .schema import ConfigRecord, record_model

# Stay silent unless the application configures logging
logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    # Result types
    "Success",
    "Failure",
    "Result",
    "chain",
    "map_success",
    "is_success",
    "is_failure",
    "unwrap",
    # Failures
    "FailureKind",
    "FailureDescriptor",
    "LoadError",
    # Records
    "ConfigRecord",
    "record_model",
    # Loading
    "TextFormat",
    "decode",
    "decode_text",
    "acquire",
    "using",
    "load",
    "load_or_raise",
    "loader_context",
]
