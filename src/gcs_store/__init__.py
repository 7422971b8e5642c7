"""Pluggable, credential-gated storage-backend factories for Google Cloud Storage."""

from gcs_store._backend import Backend
from gcs_store._config import SCHEME_GCS, Configuration, PropertyKey
from gcs_store._credentials import (
    CredentialSource,
    EnvironmentCredentialSource,
    MappingCredentialSource,
    resolve_credentials,
)
from gcs_store._errors import (
    AlreadyExists,
    BackendConstructionFailed,
    BackendUnavailable,
    CredentialsUnavailable,
    ErrorKind,
    InvalidArgument,
    InvalidPath,
    NotFound,
    PermissionDenied,
    StoreError,
)
from gcs_store._factory import BackendFactory, GCSBackendFactory
from gcs_store._models import FileInfo
from gcs_store._path import StoreURI
from gcs_store._registry import FactoryRegistry
from gcs_store._result import Err, Ok, Result

__version__ = "0.1.0"

__all__ = [
    # Core
    "BackendFactory",
    "GCSBackendFactory",
    "FactoryRegistry",
    "Backend",
    # Config & credentials
    "Configuration",
    "PropertyKey",
    "SCHEME_GCS",
    "CredentialSource",
    "EnvironmentCredentialSource",
    "MappingCredentialSource",
    "resolve_credentials",
    # Path & Models
    "StoreURI",
    "FileInfo",
    # Results
    "Ok",
    "Err",
    "Result",
    # Errors
    "ErrorKind",
    "StoreError",
    "InvalidArgument",
    "InvalidPath",
    "CredentialsUnavailable",
    "BackendConstructionFailed",
    "NotFound",
    "AlreadyExists",
    "PermissionDenied",
    "BackendUnavailable",
    # Version
    "__version__",
]
