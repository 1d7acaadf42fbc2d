from abc import ABC, abstractmethod
from typing import Any

from paging_store.core.config import STORAGE_TYPES, get_settings
from paging_store.core.exceptions import StorageError


class StorageBackend(ABC):
    @abstractmethod
    def get(self, key: str) -> Any | None:
        """Return stored value, or None if the key is missing."""
        ...

    @abstractmethod
    def put(self, key: str, value: Any) -> None:
        """Store a JSON-compatible value under key."""
        ...

    @abstractmethod
    def delete(self, key: str) -> None:
        """Delete key; missing keys are ignored."""
        ...


def get_storage(storage_type: str | None = None) -> StorageBackend:
    storage_type = storage_type or get_settings().storage_backend
    if storage_type not in STORAGE_TYPES:
        raise StorageError(
            f"Unknown storage type: {storage_type}",
            details={"storage_type": storage_type, "allowed": list(STORAGE_TYPES)},
        )
    if storage_type == "local":
        from paging_store.storage.local import LocalStorage
        return LocalStorage()
    if storage_type == "session":
        from paging_store.storage.memory import SessionStorage
        return SessionStorage()
    from paging_store.storage.memory import MemoryStorage
    return MemoryStorage()
