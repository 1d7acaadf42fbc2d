"""Reactive paging store: raw paging input in, navigation metadata out."""

from typing import Any, Callable, Mapping

from paging_store.core.config import get_settings
from paging_store.core.logging import get_logger
from paging_store.core.pagination import as_mapping, calculate_paging, normalize
from paging_store.models.paging import PagingCalcResult, PagingData
from paging_store.models.store import StoreOptions
from paging_store.storage.persistor import create_storage_persistor
from paging_store.store.base import Unsubscribe, create_derived_store, create_store

log = get_logger(__name__)


class PagingStore:
    """
    Holds the current total/limit/offset and republishes PagingCalcResult on
    every change.

    ``update`` merges partial data over the current input, ``reset`` replaces
    it. Both recompute, persist and notify subscribers before returning.
    """

    def __init__(
        self,
        paging_data: Mapping[str, Any] | PagingData | None = None,
        default_limit: int | None = None,
        store_options: StoreOptions | None = None,
    ) -> None:
        self.default_limit = default_limit if default_limit is not None else get_settings().default_limit
        self._data = create_store(normalize(paging_data, self.default_limit))
        self._paging = create_derived_store(
            [self._data],
            lambda values: calculate_paging(values[0]),
            store_options,
        )

    @property
    def data(self) -> PagingData:
        return self._data.get()

    def get(self) -> PagingCalcResult:
        return self._paging.get()

    def subscribe(self, listener: Callable[[PagingCalcResult], Any]) -> Unsubscribe:
        return self._paging.subscribe(listener)

    def update(self, paging_data: Mapping[str, Any] | PagingData | None = None) -> None:
        changes = as_mapping(paging_data)
        self._data.update(
            lambda old: normalize({**old.model_dump(), **changes}, self.default_limit)
        )

    def reset(self, limit: int | None = None) -> None:
        limit = limit if limit is not None else self.default_limit
        log.debug("paging_store_reset", limit=limit)
        self._data.set(normalize({}, limit))


def create_paging_store(
    paging_data: Mapping[str, Any] | PagingData | None = None,
    default_limit: int | None = None,
    store_options: StoreOptions | None = None,
) -> PagingStore:
    store = PagingStore(paging_data, default_limit, store_options)
    log.debug(
        "paging_store_created",
        default_limit=store.default_limit,
        persist=bool(store_options and store_options.persist),
        **store.data.model_dump(),
    )
    return store


def create_storage_paging_store(
    key: str,
    storage_type: str = "session",
    initial: Mapping[str, Any] | PagingData | None = None,
    default_limit: int | None = None,
) -> PagingStore:
    """Paging store seeded from, and saved to, the given storage backend."""
    persistor = create_storage_persistor(key, storage_type)
    return create_paging_store(
        persistor.get() or initial,
        default_limit,
        StoreOptions(persist=persistor.set),
    )
