"""Quickstart — resolve a gs:// path to a backend and use it.

Demonstrates:
- Building a Configuration with an explicit endpoint
- Letting the factory fill credentials from the environment
  (``GCS_ACCESS_KEY_ID`` / ``GCS_SECRET_ACCESS_KEY``)
- Dispatching through a FactoryRegistry
"""

from __future__ import annotations

import logging
import sys

from gcs_store import Configuration, FactoryRegistry, PropertyKey

if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO)
    path = sys.argv[1] if len(sys.argv) > 1 else "gs://my-bucket/data"

    conf = Configuration({PropertyKey.GCS_ENDPOINT: "https://storage.googleapis.com"})
    registry = FactoryRegistry()

    factory = registry.find(path, conf)
    print(f"Factory for {path}: {factory!r}")

    backend = registry.create(path, conf)
    try:
        backend.write("hello.txt", b"Hello, world!", overwrite=True)
        print(f"Content: {backend.read_bytes('hello.txt')!r}")
        for info in backend.list_files():
            print(f"  {info.path} ({info.size} bytes)")
    finally:
        backend.close()

    print(f"Configured keys after create: {sorted(conf)}")
