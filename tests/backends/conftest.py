"""Backend test fixtures -- an in-process S3-compatible server standing in for GCS."""

from __future__ import annotations

import socket
import uuid
from typing import TYPE_CHECKING

import pytest

from gcs_store._config import Configuration, PropertyKey

if TYPE_CHECKING:
    from collections.abc import Iterator


def _gcs_available() -> bool:
    try:
        import boto3  # noqa: F401
        import moto  # noqa: F401
        import s3fs  # noqa: F401

        return True
    except ImportError:
        return False


def _free_port() -> int:
    with socket.socket() as s:
        s.bind(("", 0))
        return s.getsockname()[1]


@pytest.fixture(scope="session")
def moto_server() -> Iterator[str]:
    """Start a moto HTTP server for the test session.

    Uses server mode instead of mock_aws() to avoid Python 3.13
    PEP 667 f_locals incompatibility with s3fs/aiobotocore.
    """
    if not _gcs_available():
        pytest.skip("moto/s3fs/boto3 not installed")
    from moto.moto_server.threaded_moto_server import ThreadedMotoServer

    port = _free_port()
    server = ThreadedMotoServer(port=port, verbose=False)
    server.start()
    yield f"http://127.0.0.1:{port}"
    server.stop()


@pytest.fixture()
def bucket(moto_server: str) -> str:
    """Create a fresh bucket on the moto server and return its name."""
    import boto3

    name = f"test-{uuid.uuid4().hex[:8]}"
    client = boto3.client(
        "s3",
        endpoint_url=moto_server,
        aws_access_key_id="testing",
        aws_secret_access_key="testing",
        region_name="us-east-1",
    )
    client.create_bucket(Bucket=name)
    return name


@pytest.fixture()
def gcs_configuration(moto_server: str) -> Configuration:
    """Configuration pointing the GCS backend at the moto server."""
    return Configuration(
        {
            PropertyKey.GCS_ACCESS_KEY: "testing",
            PropertyKey.GCS_SECRET_KEY: "testing",
            PropertyKey.GCS_ENDPOINT: moto_server,
        }
    )
