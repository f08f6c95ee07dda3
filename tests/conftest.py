from pathlib import Path
from typing import Any

import pytest

from cfgload import record_model


class TrackedHandle:
    """Wraps a real file object and counts close() calls."""

    def __init__(self, handle: Any):
        self._handle = handle
        self.close_calls = 0

    def read(self, *args: Any) -> bytes:
        return self._handle.read(*args)

    def close(self) -> None:
        self.close_calls += 1
        self._handle.close()

    @property
    def closed(self) -> bool:
        return self._handle.closed

    def __enter__(self) -> "TrackedHandle":
        return self

    def __exit__(self, *exc_info: Any) -> None:
        self.close()


class CountingOpener:
    """Stand-in for builtin open() that records every handle it hands out."""

    def __init__(self) -> None:
        self.calls: list[tuple[Any, str]] = []
        self.handles: list[TrackedHandle] = []

    def __call__(self, path: Any, mode: str) -> TrackedHandle:
        self.calls.append((path, mode))
        handle = TrackedHandle(open(path, mode))
        self.handles.append(handle)
        return handle


@pytest.fixture(scope="function")
def opener() -> CountingOpener:
    return CountingOpener()


@pytest.fixture(scope="session")
def Guideline() -> type:
    return record_model("Guideline", {"field": str})


@pytest.fixture(scope="session")
def Tags() -> type:
    return record_model("Tags", {"tags": [str]})


@pytest.fixture(scope="session")
def Service() -> type:
    return record_model(
        "Service",
        {
            "name": str,
            "port": (int, 8080),
            "tags": ([str], []),
            "owner": ({"team": str, "oncall": (bool, False)}, None),
        },
    )


@pytest.fixture(scope="function")
def write_file(tmp_path: Path):
    def _write(name: str, content: str | bytes) -> Path:
        path = tmp_path / name
        if isinstance(content, bytes):
            path.write_bytes(content)
        else:
            path.write_text(content, encoding="utf-8")
        return path

    return _write
