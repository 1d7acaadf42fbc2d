import copy
from typing import Any

from paging_store.storage.base import StorageBackend

# shared by every SessionStorage in this process
_session_data: dict[str, Any] = {}


class MemoryStorage(StorageBackend):
    """Values live as long as this instance."""

    def __init__(self) -> None:
        self._data: dict[str, Any] = {}

    def get(self, key: str) -> Any | None:
        value = self._data.get(key)
        return copy.deepcopy(value) if value is not None else None

    def put(self, key: str, value: Any) -> None:
        self._data[key] = copy.deepcopy(value)

    def delete(self, key: str) -> None:
        self._data.pop(key, None)


class SessionStorage(MemoryStorage):
    """Values live as long as the process."""

    def __init__(self) -> None:
        self._data = _session_data


def clear_session_storage() -> None:
    _session_data.clear()
