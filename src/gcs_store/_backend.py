"""Backend abstract base class — the contract factories construct."""

from __future__ import annotations

import abc
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Iterator

    from gcs_store._models import FileInfo


class Backend(abc.ABC):
    """Abstract base class for storage backends built by a factory.

    Paths passed to the methods are relative to the URI the backend was
    constructed for. Provider-native exceptions must never leak — they
    must be mapped to ``gcs_store`` errors.
    """

    @property
    @abc.abstractmethod
    def name(self) -> str:
        """Unique identifier for this backend type (e.g. ``'gcs'``)."""

    @abc.abstractmethod
    def exists(self, path: str) -> bool:
        """Check if an object or prefix exists. Never raises ``NotFound``."""

    @abc.abstractmethod
    def is_file(self, path: str) -> bool:
        """Return ``True`` if ``path`` is an existing object."""

    @abc.abstractmethod
    def read_bytes(self, path: str) -> bytes:
        """Read the full content of an object.

        :raises NotFound: If the object does not exist.
        """

    @abc.abstractmethod
    def write(self, path: str, content: bytes, *, overwrite: bool = False) -> None:
        """Write content to an object.

        :param overwrite: If ``False``, raise if the object already exists.
        :raises AlreadyExists: If the object exists and ``overwrite`` is ``False``.
        """

    @abc.abstractmethod
    def delete(self, path: str, *, missing_ok: bool = False) -> None:
        """Delete an object.

        :raises NotFound: If the object is missing and ``missing_ok`` is ``False``.
        """

    @abc.abstractmethod
    def list_files(self, path: str = "", *, recursive: bool = False) -> Iterator[FileInfo]:
        """List objects under ``path``.

        :param recursive: If ``True``, include objects under all nested prefixes.
        """

    def close(self) -> None:  # noqa: B027
        """Release resources. Default is a no-op."""
