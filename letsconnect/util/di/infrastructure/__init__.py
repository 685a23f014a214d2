"""Infrastructure providers."""

# Import bases
from .blobstore import BlobStoreProvider
from .persistence import PersistenceProvider

# Import implementations (needed for __subclasses__())
from .blobstore import ProdBlobStoreProvider  # noqa: F401
from .persistence import ProdPersistenceProvider  # noqa: F401

__all__ = [
    "BlobStoreProvider",
    "PersistenceProvider",
    "ProdBlobStoreProvider",
    "ProdPersistenceProvider",
]
