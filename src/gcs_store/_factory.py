"""Backend factories — path-based selection and credential-gated construction."""

from __future__ import annotations

import abc
import logging
from typing import TYPE_CHECKING

from gcs_store._config import SCHEME_GCS
from gcs_store._credentials import GCS_CREDENTIAL_KEYS, EnvironmentCredentialSource, resolve_credentials
from gcs_store._errors import BackendConstructionFailed, CredentialsUnavailable, InvalidArgument, StoreError
from gcs_store._path import StoreURI
from gcs_store._result import Err, Ok

if TYPE_CHECKING:
    from collections.abc import Callable

    from gcs_store._backend import Backend
    from gcs_store._config import Configuration
    from gcs_store._credentials import CredentialSource
    from gcs_store._result import Result

    BackendConstructor = Callable[[StoreURI, Configuration], Backend]

log = logging.getLogger(__name__)


class BackendFactory(abc.ABC):
    """Decides whether it can serve a path and builds a backend for it.

    Implementations hold no mutable state and are safe to call from
    multiple threads. ``create`` may mutate the configuration it is given.
    """

    @property
    @abc.abstractmethod
    def scheme(self) -> str:
        """Path prefix this factory claims (e.g. ``"gs://"``)."""

    def supports_path(self, path: str | None, configuration: Configuration | None = None) -> bool:
        """Return ``True`` if ``path`` starts with this factory's scheme.

        :param path: The candidate path, may be ``None``.
        :param configuration: Unused.
        """
        return path is not None and path.startswith(self.scheme)

    @abc.abstractmethod
    def try_create(self, path: str | None, configuration: Configuration | None, extra: object = None) -> Result:
        """Build a backend for ``path`` and report the outcome as a result.

        :return: ``Ok(backend)`` or ``Err(error)``.
        """

    def create(self, path: str | None, configuration: Configuration | None, extra: object = None) -> Backend:
        """Build a backend for ``path``.

        :param path: The path to serve.
        :param configuration: Configuration the backend is built from. May be
            augmented in place, even when construction fails.
        :param extra: Backend-specific options; ignored unless a factory uses them.
        :raises InvalidArgument: If ``path`` or ``configuration`` is absent or unusable.
        :raises CredentialsUnavailable: If required credentials cannot be resolved.
        :raises BackendConstructionFailed: If the backend constructor fails.
        """
        return self.try_create(path, configuration, extra).unwrap()


class GCSBackendFactory(BackendFactory):
    """Factory for :class:`~gcs_store.backends.GCSBackend`.

    Ensures the GCS access and secret keys are present before returning a
    backend; their validity is checked by the backend itself. Keys missing
    from the configuration are filled from ``credential_source``; keys
    already configured are never replaced.

    :param credential_source: Fallback source for credentials. Defaults to
        the process environment.
    :param backend_cls: Backend constructor, called with the parsed URI and
        the configuration.
    :param logger: Logger for construction failures.
    """

    def __init__(
        self,
        credential_source: CredentialSource | None = None,
        backend_cls: BackendConstructor | None = None,
        logger: logging.Logger | None = None,
    ) -> None:
        if backend_cls is None:
            from gcs_store.backends._gcs import GCSBackend

            backend_cls = GCSBackend
        self._credential_source = EnvironmentCredentialSource() if credential_source is None else credential_source
        self._backend_cls = backend_cls
        self._log = logger or log

    def __repr__(self) -> str:
        return f"GCSBackendFactory(credential_source={self._credential_source!r})"

    @property
    def scheme(self) -> str:
        return SCHEME_GCS

    def try_create(self, path: str | None, configuration: Configuration | None, extra: object = None) -> Result:
        if path is None:
            return Err(InvalidArgument("path must not be None", backend="gcs"))
        if configuration is None:
            return Err(InvalidArgument("configuration must not be None", path=path, backend="gcs"))
        try:
            uri = StoreURI(path)
        except StoreError as exc:
            return Err(exc)

        if not resolve_credentials(configuration, self._credential_source, GCS_CREDENTIAL_KEYS):
            msg = "Google credentials not available, cannot create GCS backend."
            self._log.error(msg)
            return Err(CredentialsUnavailable(msg, path=path, backend="gcs"))

        try:
            return Ok(self._backend_cls(uri, configuration))
        except Exception as exc:
            self._log.error("Failed to create GCS backend for %s", path, exc_info=exc)
            error = BackendConstructionFailed(
                "Failed to create GCS backend", path=path, backend="gcs", cause=exc
            )
            error.__cause__ = exc
            return Err(error)
