"""Configuration model — the mutable key-value store shared by factories and backends."""

from __future__ import annotations

from typing import TYPE_CHECKING, Final

if TYPE_CHECKING:
    from collections.abc import Iterator, Mapping

# Path prefix claimed by the GCS backend factory. Matched exactly and case-sensitively.
SCHEME_GCS: Final = "gs://"

DEFAULT_GCS_ENDPOINT: Final = "https://storage.googleapis.com"


class PropertyKey:
    """Well-known configuration keys."""

    GCS_ACCESS_KEY: Final = "fs.gcs.accessKeyId"
    GCS_SECRET_KEY: Final = "fs.gcs.secretAccessKey"
    GCS_ENDPOINT: Final = "fs.gcs.endpoint"


class Configuration:
    """Mutable string-to-string configuration, shared by reference.

    A key that is present holds an explicit value. Absence is represented
    by the key not being set; ``None`` is never stored.

    :param values: Optional initial values.
    """

    def __init__(self, values: Mapping[str, str] | None = None) -> None:
        self._values: dict[str, str] = {}
        for key, value in (values or {}).items():
            self.set(key, value)

    def __repr__(self) -> str:
        return f"Configuration(keys={sorted(self._values)!r})"

    def __eq__(self, other: object) -> bool:
        if isinstance(other, Configuration):
            return self._values == other._values
        return NotImplemented

    __hash__ = None  # type: ignore[assignment]

    def get(self, key: str, default: str | None = None) -> str | None:
        """Return the value for ``key``, or ``default`` if it is not set."""
        return self._values.get(key, default)

    def set(self, key: str, value: str) -> None:
        """Set ``key`` to ``value``, replacing any existing value.

        :raises TypeError: If ``value`` is not a string.
        """
        if not isinstance(value, str):
            raise TypeError(f"Configuration value for '{key}' must be a str, got {type(value).__name__}")
        self._values[key] = value

    def unset(self, key: str) -> None:
        """Remove ``key`` if present."""
        self._values.pop(key, None)

    def __contains__(self, key: object) -> bool:
        return key in self._values

    def __iter__(self) -> Iterator[str]:
        return iter(list(self._values))

    def __len__(self) -> int:
        return len(self._values)

    def to_dict(self) -> dict[str, str]:
        """Return a snapshot of all values."""
        return dict(self._values)

    def copy(self) -> Configuration:
        """Return an independent copy."""
        return Configuration(self._values)

    @classmethod
    def from_dict(cls, data: Mapping[str, object]) -> Configuration:
        """Construct from a plain dict, coercing values to strings.

        Entries whose value is ``None`` are skipped.

        :param data: Mapping of keys to values.
        """
        conf = cls()
        for key, value in data.items():
            if value is None:
                continue
            conf.set(str(key), str(value))
        return conf
