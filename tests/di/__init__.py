"""Mock providers for testing."""

from .blobstore import MockBlobStoreProvider
from .persistence import MockPersistenceProvider
from .container import build_test_container

__all__ = [
    "MockBlobStoreProvider",
    "MockPersistenceProvider",
    "build_test_container",
]
