"""Tests for FactoryRegistry dispatch."""

from __future__ import annotations

import logging

import pytest

from gcs_store._config import Configuration, PropertyKey
from gcs_store._credentials import MappingCredentialSource
from gcs_store._errors import CredentialsUnavailable, InvalidPath
from gcs_store._factory import BackendFactory, GCSBackendFactory
from gcs_store._registry import FactoryRegistry
from gcs_store._result import Ok


class _PrefixFactory(BackendFactory):
    """Factory claiming an arbitrary prefix and returning a marker object."""

    def __init__(self, prefix: str, label: str) -> None:
        self._prefix = prefix
        self.label = label

    def __repr__(self) -> str:
        return f"_PrefixFactory({self.label!r})"

    @property
    def scheme(self) -> str:
        return self._prefix

    def try_create(self, path, configuration, extra=None):  # type: ignore[no-untyped-def]
        return Ok((self.label, path, extra))


class TestConstruction:
    def test_builtin_factories(self) -> None:
        reg = FactoryRegistry()
        assert len(reg) == 1
        assert isinstance(reg.factories[0], GCSBackendFactory)

    def test_explicit_factories(self) -> None:
        a = _PrefixFactory("a://", "a")
        reg = FactoryRegistry([a])
        assert reg.factories == (a,)

    def test_empty(self) -> None:
        assert len(FactoryRegistry([])) == 0


class TestFind:
    def test_first_match_in_order(self) -> None:
        reg = FactoryRegistry([_PrefixFactory("a://", "a"), _PrefixFactory("b://", "b")])
        found = reg.find("b://x")
        assert isinstance(found, _PrefixFactory)
        assert found.label == "b"

    def test_no_match(self) -> None:
        reg = FactoryRegistry([_PrefixFactory("a://", "a")])
        assert reg.find("z://x") is None
        assert reg.find(None) is None

    def test_register_appends(self) -> None:
        reg = FactoryRegistry([])
        reg.register(_PrefixFactory("a://", "a"))
        assert reg.find("a://x") is not None

    def test_overlap_warns_and_uses_first(self, caplog: pytest.LogCaptureFixture) -> None:
        first = _PrefixFactory("gs://", "first")
        second = _PrefixFactory("gs://bucket", "second")
        reg = FactoryRegistry([first, second])
        with caplog.at_level(logging.WARNING, logger="gcs_store._registry"):
            assert reg.find("gs://bucket/key") is first
        assert "Multiple factories claim path" in caplog.text
        assert reg.find_all("gs://bucket/key") == [first, second]

    def test_no_warning_for_unique_match(self, caplog: pytest.LogCaptureFixture) -> None:
        reg = FactoryRegistry([_PrefixFactory("a://", "a"), _PrefixFactory("b://", "b")])
        with caplog.at_level(logging.WARNING, logger="gcs_store._registry"):
            reg.find("a://x")
        assert caplog.records == []


class TestCreate:
    def test_dispatches(self) -> None:
        reg = FactoryRegistry([_PrefixFactory("a://", "a"), _PrefixFactory("b://", "b")])
        assert reg.create("b://x", Configuration(), extra=1) == ("b", "b://x", 1)  # type: ignore[comparison-overlap]

    def test_unclaimed_path(self) -> None:
        reg = FactoryRegistry([_PrefixFactory("a://", "a")])
        with pytest.raises(InvalidPath, match="a://") as exc_info:
            reg.create("z://x", Configuration())
        assert exc_info.value.path == "z://x"

    def test_factory_errors_propagate(self) -> None:
        factory = GCSBackendFactory(credential_source=MappingCredentialSource())
        reg = FactoryRegistry([factory])
        with pytest.raises(CredentialsUnavailable):
            reg.create("gs://bucket", Configuration())

    def test_gcs_end_to_end(self, recording_backend) -> None:  # type: ignore[no-untyped-def]
        factory = GCSBackendFactory(
            credential_source=MappingCredentialSource(
                {PropertyKey.GCS_ACCESS_KEY: "ak", PropertyKey.GCS_SECRET_KEY: "sk"}
            ),
            backend_cls=recording_backend,
        )
        reg = FactoryRegistry([_PrefixFactory("s3://", "s3"), factory])
        backend = reg.create("gs://bucket/key", Configuration())
        assert isinstance(backend, recording_backend)
        assert str(backend.uri) == "gs://bucket/key"
