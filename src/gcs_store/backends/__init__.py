"""Backend implementations."""

from gcs_store.backends._gcs import GCSBackend

__all__ = ["GCSBackend"]
