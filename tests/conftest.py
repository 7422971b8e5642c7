"""Shared test fixtures and marker registration."""

from __future__ import annotations

from typing import TYPE_CHECKING

import pytest

from gcs_store._backend import Backend

if TYPE_CHECKING:
    from collections.abc import Iterator

    from gcs_store._config import Configuration
    from gcs_store._models import FileInfo
    from gcs_store._path import StoreURI


def pytest_configure(config: object) -> None:
    """Register custom markers."""
    if isinstance(config, pytest.Config):
        config.addinivalue_line("markers", "integration: requires external services")


class RecordingBackend(Backend):
    """In-memory backend that records the arguments it was built with."""

    instances: list[RecordingBackend] = []

    def __init__(self, uri: StoreURI, configuration: Configuration) -> None:
        self.uri = uri
        self.configuration = configuration
        self.snapshot = configuration.to_dict()
        self._objects: dict[str, bytes] = {}
        RecordingBackend.instances.append(self)

    @property
    def name(self) -> str:
        return "recording"

    def exists(self, path: str) -> bool:
        return path in self._objects

    def is_file(self, path: str) -> bool:
        return path in self._objects

    def read_bytes(self, path: str) -> bytes:
        return self._objects[path]

    def write(self, path: str, content: bytes, *, overwrite: bool = False) -> None:
        self._objects[path] = content

    def delete(self, path: str, *, missing_ok: bool = False) -> None:
        self._objects.pop(path, None)

    def list_files(self, path: str = "", *, recursive: bool = False) -> Iterator[FileInfo]:
        return iter(())


@pytest.fixture()
def recording_backend() -> Iterator[type[RecordingBackend]]:
    """Yield the recording backend class with a clean instance log."""
    RecordingBackend.instances.clear()
    yield RecordingBackend
    RecordingBackend.instances.clear()
