"""Error handling — InvalidArgument, CredentialsUnavailable, BackendConstructionFailed.

Demonstrates both the raising ``create`` and the result-returning
``try_create``, without touching the real environment or network.
"""

from __future__ import annotations

from gcs_store import (
    BackendConstructionFailed,
    Configuration,
    CredentialsUnavailable,
    Err,
    GCSBackendFactory,
    InvalidArgument,
    MappingCredentialSource,
    Ok,
    PropertyKey,
    StoreError,
)


def _unreachable_backend(uri: object, configuration: Configuration) -> object:
    raise ConnectionError(f"could not reach storage for {uri}")


if __name__ == "__main__":
    # --- InvalidArgument: absent inputs ---
    factory = GCSBackendFactory(credential_source=MappingCredentialSource())
    try:
        factory.create(None, Configuration())
    except InvalidArgument as exc:
        print(f"InvalidArgument: {exc}")

    # --- CredentialsUnavailable: only the access key is known ---
    partial = MappingCredentialSource({PropertyKey.GCS_ACCESS_KEY: "GOOG1EXAMPLE"})
    conf = Configuration()
    try:
        GCSBackendFactory(credential_source=partial).create("gs://bucket/obj", conf)
    except CredentialsUnavailable as exc:
        print(f"\nCredentialsUnavailable: {exc}")
        print(f"  configuration keys now: {sorted(conf)}")

    # --- BackendConstructionFailed: the backend constructor raised ---
    full = MappingCredentialSource({PropertyKey.GCS_ACCESS_KEY: "GOOG1EXAMPLE", PropertyKey.GCS_SECRET_KEY: "secret"})
    failing = GCSBackendFactory(credential_source=full, backend_cls=_unreachable_backend)  # type: ignore[arg-type]
    try:
        failing.create("gs://bucket/obj", Configuration())
    except BackendConstructionFailed as exc:
        print(f"\nBackendConstructionFailed: {exc}")
        print(f"  cause: {exc.cause!r}")

    # --- try_create returns a result instead of raising ---
    for path in [None, "gs://bucket/obj"]:
        result = failing.try_create(path, Configuration())
        match result:
            case Ok(value=backend):
                print(f"\nOk: {backend!r}")
            case Err(error=error):
                print(f"\nErr({result.kind.name}): {error}")

    # --- Catch any gcs_store error with the base class ---
    try:
        factory.create("gs://bucket/../escape", Configuration())
    except StoreError as exc:
        print(f"\nStoreError ({type(exc).__name__}): {exc}")

    print("\nDone!")
