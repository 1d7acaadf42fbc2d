"""Key-bound persistor over a storage backend."""

from typing import Any

from pydantic import BaseModel

from paging_store.core.logging import get_logger
from paging_store.storage.base import StorageBackend, get_storage

log = get_logger(__name__)


class StoragePersistor:
    def __init__(self, key: str, backend: StorageBackend) -> None:
        self.key = key
        self.backend = backend

    def get(self) -> Any | None:
        return self.backend.get(self.key)

    def set(self, value: Any) -> None:
        if isinstance(value, BaseModel):
            value = value.model_dump(by_alias=True)
        self.backend.put(self.key, value)

    def clear(self) -> None:
        self.backend.delete(self.key)


def create_storage_persistor(key: str, storage_type: str | None = None) -> StoragePersistor:
    backend = get_storage(storage_type)
    log.debug("persistor_created", key=key, backend=type(backend).__name__)
    return StoragePersistor(key, backend)
