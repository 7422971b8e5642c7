"""Immutable listing metadata."""

from __future__ import annotations

import dataclasses
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from datetime import datetime


@dataclasses.dataclass(frozen=True, eq=False)
class FileInfo:
    """Immutable snapshot of object metadata.

    :param path: Object key relative to the backend's root URI.
    :param name: Object name (final key component).
    :param size: Object size in bytes.
    :param modified_at: Last modification time.
    :param checksum: Optional checksum (e.g. ETag).
    """

    path: str
    name: str
    size: int
    modified_at: datetime
    checksum: str | None = None

    def __eq__(self, other: object) -> bool:
        if isinstance(other, FileInfo):
            return self.path == other.path
        return NotImplemented

    def __hash__(self) -> int:
        return hash(self.path)
