"""
Base repository class for entity storage.

Provides a common abstraction layer for all repositories. Durable storage is
an injected dependency: any mutable mapping keyed by entity ID can back a
repository, and a plain dict is used when none is given.
"""

from typing import TypeVar, Generic, Iterator, MutableMapping, Optional


T = TypeVar("T")


class BaseRepository(Generic[T]):
    """
    Base class for all repositories.

    Provides common functionality for keyed entity storage:
    - Backing store access via self._store
    - Generic type parameter for model type hints

    Subclasses should implement domain-specific lookups on top of the
    primitives below. Repositories never perform authorization checks;
    the service layer is responsible for that.

    Example:
        class ThreadRepository(BaseRepository[Thread]):
            def find_by_ride(self, ride_id: str) -> list[Thread]:
                return [t for t in self.values() if t.ride_id == ride_id]
    """

    def __init__(self, store: Optional[MutableMapping[str, T]] = None) -> None:
        """
        Initialize the repository with a backing store.

        Args:
            store: Mapping used to hold entities. Defaults to a new dict.
        """
        self._store: MutableMapping[str, T] = store if store is not None else {}

    def get(self, key: str) -> Optional[T]:
        """Get an entity by key, or None if absent."""
        return self._store.get(key)

    def exists(self, key: str) -> bool:
        """Check whether an entity is stored under key."""
        return key in self._store

    def save(self, key: str, entity: T) -> T:
        """Insert or replace the entity stored under key."""
        self._store[key] = entity
        return entity

    def delete(self, key: str) -> bool:
        """
        Remove the entity stored under key.

        Returns:
            True if something was removed, False if the key was absent.
        """
        if key not in self._store:
            return False
        del self._store[key]
        return True

    def values(self) -> Iterator[T]:
        """Iterate over a snapshot of all stored entities."""
        return iter(list(self._store.values()))

    def __len__(self) -> int:
        return len(self._store)
