"""
Failure descriptors and exceptions for cfgload.

Load failures are values (`FailureDescriptor`) carried by `Failure`. The only
exception type, `LoadError`, exists for callers who explicitly unwrap a
Result into exception-based control flow.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class FailureKind(Enum):
    """
    Closed set of reasons a load can fail.

    - RESOURCE_UNAVAILABLE: the path could not be opened for reading
      (missing, permission denied, empty path, any OS-level open error)
    - DECODE_ERROR: the content is not valid structured text, or does not
      match the target record schema
    """

    RESOURCE_UNAVAILABLE = "ResourceUnavailable"
    DECODE_ERROR = "DecodeError"


@dataclass(frozen=True, slots=True)
class FailureDescriptor:
    """What went wrong (`kind`) and a human-readable `message`."""

    kind: FailureKind
    message: str

    def __str__(self) -> str:
        return f"{self.kind.value}: {self.message}"


DECODE_FAILED_MESSAGE = "failed to parse config"


def resource_unavailable(path: object, reason: str) -> FailureDescriptor:
    """Descriptor for a path that could not be opened, naming the OS reason."""
    return FailureDescriptor(
        FailureKind.RESOURCE_UNAVAILABLE, f"failed to open {path}: {reason}"
    )


def decode_error() -> FailureDescriptor:
    """Descriptor for content that does not decode into the target record."""
    return FailureDescriptor(FailureKind.DECODE_ERROR, DECODE_FAILED_MESSAGE)


class LoadError(Exception):
    """Raised when a failed Result is unwrapped."""

    def __init__(self, descriptor: FailureDescriptor):
        self.descriptor = descriptor
        super().__init__(descriptor.message)

    @property
    def kind(self) -> FailureKind:
        return self.descriptor.kind
