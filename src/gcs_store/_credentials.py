"""Credential sources and the credential resolution step."""

from __future__ import annotations

import logging
import os
from typing import TYPE_CHECKING, Protocol, runtime_checkable

from gcs_store._config import PropertyKey

if TYPE_CHECKING:
    from collections.abc import Iterable, Mapping

    from gcs_store._config import Configuration

log = logging.getLogger(__name__)

GCS_CREDENTIAL_KEYS: tuple[str, ...] = (PropertyKey.GCS_ACCESS_KEY, PropertyKey.GCS_SECRET_KEY)

# Conventional environment variable names tried after the verbatim property key.
_ENV_ALIASES: dict[str, str] = {
    PropertyKey.GCS_ACCESS_KEY: "GCS_ACCESS_KEY_ID",
    PropertyKey.GCS_SECRET_KEY: "GCS_SECRET_ACCESS_KEY",
}


@runtime_checkable
class CredentialSource(Protocol):
    """Read-only, process-wide lookup used as a fallback for credentials."""

    def get(self, key: str) -> str | None:
        """Return the value for ``key``, or ``None`` if it is not provided."""
        ...


class MappingCredentialSource:
    """Credential source backed by a plain mapping.

    :param values: Mapping of configuration keys to credential values.
    """

    def __init__(self, values: Mapping[str, str] | None = None) -> None:
        self._values = dict(values or {})

    def __repr__(self) -> str:
        return f"MappingCredentialSource(keys={sorted(self._values)!r})"

    def get(self, key: str) -> str | None:
        return self._values.get(key)


class EnvironmentCredentialSource:
    """Credential source backed by the process environment.

    The property key is looked up verbatim first, then under its
    conventional environment variable alias (``GCS_ACCESS_KEY_ID``,
    ``GCS_SECRET_ACCESS_KEY``).

    :param environ: Environment mapping, defaults to ``os.environ`` read at lookup time.
    :param aliases: Overrides for the key-to-variable aliases.
    """

    def __init__(self, environ: Mapping[str, str] | None = None, aliases: Mapping[str, str] | None = None) -> None:
        self._environ = environ
        self._aliases = dict(_ENV_ALIASES if aliases is None else aliases)

    def __repr__(self) -> str:
        return f"EnvironmentCredentialSource(aliases={self._aliases!r})"

    def get(self, key: str) -> str | None:
        environ = os.environ if self._environ is None else self._environ
        value = environ.get(key)
        if value is None and key in self._aliases:
            value = environ.get(self._aliases[key])
        return value


def resolve_credentials(
    configuration: Configuration,
    source: CredentialSource,
    keys: Iterable[str] = GCS_CREDENTIAL_KEYS,
) -> bool:
    """Fill missing credential keys from ``source`` and report whether all are present.

    A key already set in ``configuration`` is never overwritten. Repeated
    calls converge on the same configuration.

    :param configuration: The configuration to fill in place.
    :param source: Fallback source for keys the configuration lacks.
    :param keys: The credential keys that must all be present.
    :return: ``True`` if every key is set after filling.
    """
    keys = tuple(keys)
    for key in keys:
        ambient = source.get(key)
        if ambient is not None and configuration.get(key) is None:
            configuration.set(key, ambient)
            log.debug("Filled configuration key %r from %r", key, source)
    return all(configuration.get(key) is not None for key in keys)
