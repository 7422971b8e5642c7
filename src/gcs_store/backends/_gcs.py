"""Google Cloud Storage backend using s3fs against the GCS XML interoperability API."""

from __future__ import annotations

from contextlib import contextmanager
from datetime import datetime, timezone
from typing import TYPE_CHECKING, Any

from gcs_store._backend import Backend
from gcs_store._config import DEFAULT_GCS_ENDPOINT, PropertyKey
from gcs_store._errors import (
    AlreadyExists,
    BackendUnavailable,
    NotFound,
    PermissionDenied,
    StoreError,
)
from gcs_store._models import FileInfo

if TYPE_CHECKING:
    from collections.abc import Iterator

    from gcs_store._config import Configuration
    from gcs_store._path import StoreURI


class GCSBackend(Backend):
    """GCS backend authenticated with HMAC access and secret keys.

    The filesystem client is built in the constructor, which also checks
    that the bucket exists, so bad credentials or an unreachable endpoint
    surface at construction time.

    :param uri: Bucket (and optional key prefix) this backend is scoped to.
    :param configuration: Configuration holding the access key, secret key
        and, optionally, the endpoint.
    :param client_options: Additional options passed to s3fs.
    :raises ValueError: If the access or secret key is not configured.
    :raises NotFound: If the bucket does not exist.
    """

    def __init__(
        self,
        uri: StoreURI,
        configuration: Configuration,
        *,
        client_options: dict[str, Any] | None = None,
    ) -> None:
        key = configuration.get(PropertyKey.GCS_ACCESS_KEY)
        secret = configuration.get(PropertyKey.GCS_SECRET_KEY)
        if key is None or secret is None:
            raise ValueError(
                f"'{PropertyKey.GCS_ACCESS_KEY}' and '{PropertyKey.GCS_SECRET_KEY}' must both be configured"
            )
        self._uri = uri
        self._key = key
        self._secret = secret
        self._endpoint_url = configuration.get(PropertyKey.GCS_ENDPOINT, DEFAULT_GCS_ENDPOINT)
        self._client_options = client_options or {}
        self._fs_instance: Any = None
        with self._errors(str(uri)):
            if not self._fs.exists(uri.bucket):
                raise NotFound(f"Bucket not found: {uri.bucket}", path=str(uri), backend=self.name)

    def __repr__(self) -> str:
        return f"GCSBackend(uri={str(self._uri)!r}, endpoint_url={self._endpoint_url!r})"

    @property
    def name(self) -> str:
        return "gcs"

    @property
    def uri(self) -> StoreURI:
        """The URI this backend is scoped to."""
        return self._uri

    # region: lazy filesystem

    @property
    def _fs(self) -> Any:
        if self._fs_instance is None:
            import s3fs  # type: ignore[import-untyped]

            opts: dict[str, Any] = dict(self._client_options)
            opts["endpoint_url"] = self._endpoint_url
            opts["key"] = self._key
            opts["secret"] = self._secret
            opts.setdefault("anon", False)
            opts.setdefault("skip_instance_cache", True)
            self._fs_instance = s3fs.S3FileSystem(**opts)
        return self._fs_instance

    # endregion

    # region: path helpers

    def _gcs_path(self, path: str) -> str:
        target = self._uri / path if path else self._uri
        if target.key:
            return f"{target.bucket}/{target.key}"
        return target.bucket

    def _rel_path(self, gcs_path: str) -> str:
        prefix = f"{self._gcs_path('')}/"
        if gcs_path.startswith(prefix):
            return gcs_path[len(prefix) :]
        return gcs_path

    # endregion

    # region: error mapping

    @contextmanager
    def _errors(self, path: str = "") -> Iterator[None]:
        """Map s3fs/botocore exceptions to gcs_store errors."""
        try:
            yield
        except StoreError:
            raise
        except FileNotFoundError:
            raise NotFound(f"Not found: {path}", path=path, backend=self.name) from None
        except PermissionError:
            raise PermissionDenied(f"Permission denied: {path}", path=path, backend=self.name) from None
        except Exception as exc:
            raise self._classify_error(exc, path) from exc

    def _classify_error(self, exc: Exception, path: str) -> StoreError:
        """Classify an unknown exception into a gcs_store error type."""
        msg = str(exc).lower()
        if "404" in msg or "nosuchkey" in msg or "nosuchbucket" in msg or "not found" in msg:
            return NotFound(f"Not found: {path}", path=path, backend=self.name)
        if "403" in msg or "accessdenied" in msg or "access denied" in msg or "signaturedoesnotmatch" in msg:
            return PermissionDenied(f"Permission denied: {path}", path=path, backend=self.name)
        if any(kw in msg for kw in ("endpoint", "connect", "timeout", "dns", "name or service")):
            return BackendUnavailable(str(exc), path=path, backend=self.name)
        return StoreError(str(exc), path=path, backend=self.name)

    # endregion

    # region: helpers

    def _info_to_fileinfo(self, info: dict[str, Any], path: str) -> FileInfo:
        """Convert an s3fs info dict to a FileInfo."""
        name = path.rsplit("/", 1)[-1]
        size = info.get("size", info.get("Size", 0)) or 0
        modified = info.get("LastModified", info.get("last_modified"))
        if isinstance(modified, str):
            modified = datetime.fromisoformat(modified)
        if modified is not None and modified.tzinfo is None:
            modified = modified.replace(tzinfo=timezone.utc)
        if modified is None:
            modified = datetime.now(tz=timezone.utc)
        etag = info.get("ETag")
        return FileInfo(
            path=path,
            name=name,
            size=int(size),
            modified_at=modified,
            checksum=etag.strip('"') if isinstance(etag, str) else None,
        )

    # endregion

    # region: existence checks

    def exists(self, path: str) -> bool:
        with self._errors(path):
            return bool(self._fs.exists(self._gcs_path(path)))

    def is_file(self, path: str) -> bool:
        with self._errors(path):
            try:
                info = self._fs.info(self._gcs_path(path))
                return bool(info.get("type") == "file")
            except FileNotFoundError:
                return False

    # endregion

    # region: read and write

    def read_bytes(self, path: str) -> bytes:
        with self._errors(path):
            return bytes(self._fs.cat_file(self._gcs_path(path)))

    def write(self, path: str, content: bytes, *, overwrite: bool = False) -> None:
        with self._errors(path):
            if not overwrite and self._fs.exists(self._gcs_path(path)):
                raise AlreadyExists(f"Object already exists: {path}", path=path, backend=self.name)
            self._fs.pipe_file(self._gcs_path(path), bytes(content))

    def delete(self, path: str, *, missing_ok: bool = False) -> None:
        with self._errors(path):
            if not self._fs.exists(self._gcs_path(path)):
                if not missing_ok:
                    raise NotFound(f"Object not found: {path}", path=path, backend=self.name)
                return
            self._fs.rm(self._gcs_path(path))

    # endregion

    # region: listing

    def list_files(self, path: str = "", *, recursive: bool = False) -> Iterator[FileInfo]:
        with self._errors(path):
            gcs_path = self._gcs_path(path)
            if not self._fs.exists(gcs_path):
                return
            if recursive:
                results: dict[str, Any] = self._fs.find(gcs_path, detail=True)
                entries = list(results.values())
            else:
                entries = self._fs.ls(gcs_path, detail=True)
        for info in entries:
            if info.get("type") == "file":
                yield self._info_to_fileinfo(info, self._rel_path(info["name"]))

    # endregion

    # region: lifecycle

    def close(self) -> None:
        self._fs_instance = None

    # endregion
