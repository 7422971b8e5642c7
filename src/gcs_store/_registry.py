"""FactoryRegistry — ordered backend factories and path-based dispatch."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from gcs_store._errors import InvalidPath

if TYPE_CHECKING:
    from collections.abc import Iterable

    from gcs_store._backend import Backend
    from gcs_store._config import Configuration
    from gcs_store._factory import BackendFactory

log = logging.getLogger(__name__)


def _builtin_factories() -> list[BackendFactory]:
    """Return the built-in factories."""
    from gcs_store._factory import GCSBackendFactory

    return [GCSBackendFactory()]


class FactoryRegistry:
    """Holds backend factories and picks one for a given path.

    Factories are queried with ``supports_path`` in registration order and
    the first match wins. Scheme prefixes are expected to be unique across
    registered factories; overlapping claims are logged, not rejected.

    :param factories: Initial factories. Defaults to the built-in ones.
    """

    def __init__(self, factories: Iterable[BackendFactory] | None = None) -> None:
        self._factories: list[BackendFactory] = list(_builtin_factories() if factories is None else factories)

    def __repr__(self) -> str:
        return f"FactoryRegistry(factories={self._factories!r})"

    def __len__(self) -> int:
        return len(self._factories)

    @property
    def factories(self) -> tuple[BackendFactory, ...]:
        """Registered factories in dispatch order."""
        return tuple(self._factories)

    def register(self, factory: BackendFactory) -> None:
        """Append a factory. It is queried after all earlier registrations.

        :param factory: The factory to add.
        """
        self._factories.append(factory)

    def find_all(self, path: str | None, configuration: Configuration | None = None) -> list[BackendFactory]:
        """Return every factory that claims ``path``, in dispatch order."""
        return [f for f in self._factories if f.supports_path(path, configuration)]

    def find(self, path: str | None, configuration: Configuration | None = None) -> BackendFactory | None:
        """Return the first factory that claims ``path``, or ``None``."""
        eligible = self.find_all(path, configuration)
        if not eligible:
            return None
        if len(eligible) > 1:
            log.warning(
                "Multiple factories claim path %r: %s; using %r",
                path,
                ", ".join(repr(f) for f in eligible),
                eligible[0],
            )
        return eligible[0]

    def create(self, path: str | None, configuration: Configuration | None, extra: object = None) -> Backend:
        """Create a backend for ``path`` with the first factory that claims it.

        :raises InvalidPath: If no registered factory supports ``path``.
        """
        factory = self.find(path, configuration)
        if factory is None:
            schemes = sorted({f.scheme for f in self._factories})
            raise InvalidPath(f"No registered factory supports path. Registered schemes: {schemes}", path=path)
        return factory.create(path, configuration, extra)
