import re
from pathlib import Path
from typing import Any

import orjson

from paging_store.core.config import get_settings
from paging_store.core.exceptions import StorageError
from paging_store.core.logging import get_logger
from paging_store.storage.base import StorageBackend

log = get_logger(__name__)

_UNSAFE = re.compile(r"[^A-Za-z0-9._-]")


class LocalStorage(StorageBackend):
    """One JSON file per key under the configured directory."""

    def __init__(self, root: str | Path | None = None) -> None:
        self.root = Path(root or get_settings().storage_local_path)
        self.root.mkdir(parents=True, exist_ok=True)

    def _path(self, key: str) -> Path:
        return self.root / f"{_UNSAFE.sub('_', key)}.json"

    def get(self, key: str) -> Any | None:
        path = self._path(key)
        if not path.exists():
            return None
        try:
            return orjson.loads(path.read_bytes())
        except orjson.JSONDecodeError as e:
            log.warning("storage_read_failed", key=key, path=str(path), error=str(e))
            raise StorageError(f"Could not decode stored value for {key}", details={"path": str(path)}) from e

    def put(self, key: str, value: Any) -> None:
        path = self._path(key)
        tmp = path.with_suffix(".tmp")
        tmp.write_bytes(orjson.dumps(value))
        tmp.replace(path)

    def delete(self, key: str) -> None:
        path = self._path(key)
        if path.exists():
            path.unlink()
