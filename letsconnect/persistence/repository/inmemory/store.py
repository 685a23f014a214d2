"""Shared in-memory document store for testing.

Repositories are request scoped while the store lives as long as the
container, so state survives across requests just like a database.
"""

from collections import defaultdict
from typing import Any
from uuid import UUID


class InMemoryDocumentStore:
    """Named collections of immutable domain models keyed by id."""

    def __init__(self) -> None:
        self._collections: dict[str, dict[UUID, Any]] = defaultdict(dict)

    def collection(self, name: str) -> dict[UUID, Any]:
        return self._collections[name]

    def clear(self) -> None:
        self._collections.clear()
