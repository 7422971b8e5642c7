"""StoreURI — immutable, validated ``scheme://bucket/key`` value object."""

from __future__ import annotations

from typing import Final

from gcs_store._errors import InvalidPath

_SEPARATOR: Final = "://"


class StoreURI:
    """An immutable, normalized object-storage URI.

    :param raw: The raw URI string, e.g. ``"gs://bucket/dir/file.txt"``.
    :raises InvalidPath: If the URI is malformed or unsafe.
    """

    __slots__ = ("_bucket", "_key", "_scheme")
    _scheme: Final[str]  # type: ignore[misc]
    _bucket: Final[str]  # type: ignore[misc]
    _key: Final[str]  # type: ignore[misc]

    def __init__(self, raw: str) -> None:
        scheme, bucket, key = self._parse(raw)
        object.__setattr__(self, "_scheme", scheme)
        object.__setattr__(self, "_bucket", bucket)
        object.__setattr__(self, "_key", key)

    @classmethod
    def _parse(cls, raw: str) -> tuple[str, str, str]:
        if "\0" in raw:
            raise InvalidPath("Path contains null byte", path=raw)
        scheme, sep, rest = raw.partition(_SEPARATOR)
        if not sep or not scheme:
            raise InvalidPath("Path has no scheme", path=raw)
        bucket, _, key = rest.partition("/")
        if not bucket:
            raise InvalidPath("Path has no bucket", path=raw)
        return scheme, bucket, cls._normalize_key(key, raw)

    @staticmethod
    def _normalize_key(key: str, raw: str) -> str:
        # Backslash → forward slash
        p = key.replace("\\", "/")
        parts: list[str] = []
        for segment in p.split("/"):
            if segment == "" or segment == ".":
                continue
            if segment == "..":
                raise InvalidPath("Path contains '..' segment", path=raw)
            parts.append(segment)
        return "/".join(parts)

    @property
    def scheme(self) -> str:
        """URI scheme without separator (e.g. ``"gs"``)."""
        return self._scheme

    @property
    def bucket(self) -> str:
        return self._bucket

    @property
    def key(self) -> str:
        """Normalized object key, empty for the bucket root."""
        return self._key

    @property
    def name(self) -> str:
        """Final component of the key, or the bucket name at the root."""
        if not self._key:
            return self._bucket
        return self._key.rsplit("/", 1)[-1]

    @property
    def parts(self) -> tuple[str, ...]:
        """Tuple of key components."""
        if not self._key:
            return ()
        return tuple(self._key.split("/"))

    def __truediv__(self, other: str) -> StoreURI:
        return StoreURI(f"{self}/{other}")

    def __str__(self) -> str:
        base = f"{self._scheme}{_SEPARATOR}{self._bucket}"
        if self._key:
            return f"{base}/{self._key}"
        return base

    def __repr__(self) -> str:
        return f"StoreURI({str(self)!r})"

    def __eq__(self, other: object) -> bool:
        if isinstance(other, StoreURI):
            return (self._scheme, self._bucket, self._key) == (other._scheme, other._bucket, other._key)
        return NotImplemented

    def __hash__(self) -> int:
        return hash((self._scheme, self._bucket, self._key))

    def __setattr__(self, name: str, value: object) -> None:
        raise AttributeError(f"StoreURI is immutable: cannot set '{name}'")

    def __delattr__(self, name: str) -> None:
        raise AttributeError(f"StoreURI is immutable: cannot delete '{name}'")
