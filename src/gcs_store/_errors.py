"""Normalized error hierarchy for gcs_store."""

from __future__ import annotations

import enum
from typing import ClassVar, Optional


class ErrorKind(enum.Enum):
    """Failure categories surfaced by backend factories."""

    INVALID_ARGUMENT = "invalid_argument"
    CREDENTIALS_UNAVAILABLE = "credentials_unavailable"
    BACKEND_CONSTRUCTION_FAILED = "backend_construction_failed"
    BACKEND_ERROR = "backend_error"


class StoreError(Exception):
    """Base class for all gcs_store errors.

    :param message: Human-readable error description.
    :param path: The path involved in the error, if any.
    :param backend: The backend name involved, if any.
    """

    kind: ClassVar[ErrorKind] = ErrorKind.BACKEND_ERROR

    def __init__(self, message: str = "", *, path: Optional[str] = None, backend: Optional[str] = None) -> None:
        self.path = path
        self.backend = backend
        super().__init__(message)

    def __str__(self) -> str:
        parts = [super().__str__()]
        if self.path is not None:
            parts.append(f"path={self.path!r}")
        if self.backend is not None:
            parts.append(f"backend={self.backend!r}")
        return " | ".join(parts) if len(parts) > 1 else parts[0]

    def __repr__(self) -> str:
        cls = type(self).__name__
        args = [repr(super().__str__())]
        if self.path is not None:
            args.append(f"path={self.path!r}")
        if self.backend is not None:
            args.append(f"backend={self.backend!r}")
        return f"{cls}({', '.join(args)})"


class InvalidArgument(StoreError):
    """Raised when a required argument is missing or unusable."""

    kind = ErrorKind.INVALID_ARGUMENT


class InvalidPath(InvalidArgument):
    """Raised for malformed, unsafe, or unclaimed paths."""


class CredentialsUnavailable(StoreError):
    """Raised when the access and secret keys cannot both be resolved."""

    kind = ErrorKind.CREDENTIALS_UNAVAILABLE


class BackendConstructionFailed(StoreError):
    """Raised when a backend constructor fails.

    :param cause: The exception raised by the backend constructor.
    """

    kind = ErrorKind.BACKEND_CONSTRUCTION_FAILED

    def __init__(
        self,
        message: str = "",
        *,
        path: Optional[str] = None,
        backend: Optional[str] = None,
        cause: Optional[BaseException] = None,
    ) -> None:
        self.cause = cause
        super().__init__(message, path=path, backend=backend)

    def __str__(self) -> str:
        base = super().__str__()
        if self.cause is not None:
            return f"{base} | cause={type(self.cause).__name__}: {self.cause}"
        return base


class NotFound(StoreError):
    """Raised when a bucket or object does not exist."""


class AlreadyExists(StoreError):
    """Raised when a target already exists and overwrite is not allowed."""


class PermissionDenied(StoreError):
    """Raised when access is denied by the storage provider."""


class BackendUnavailable(StoreError):
    """Raised when the storage provider cannot be reached."""
