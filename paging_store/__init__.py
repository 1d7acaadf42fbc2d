from paging_store.core.exceptions import (
    InvalidCallbackError,
    InvalidPagingDataError,
    PagingError,
    StorageError,
)
from paging_store.core.pagination import (
    calculate_paging,
    normalize,
    offset_from_page,
    page_from_offset,
)
from paging_store.models import PagingCalcResult, PagingData, StoreOptions
from paging_store.services.paging import (
    PagingStore,
    create_paging_store,
    create_storage_paging_store,
)
from paging_store.storage.persistor import StoragePersistor, create_storage_persistor
from paging_store.store.base import DerivedStore, Store, create_derived_store, create_store

__all__ = [
    "calculate_paging",
    "normalize",
    "page_from_offset",
    "offset_from_page",
    "PagingData",
    "PagingCalcResult",
    "StoreOptions",
    "Store",
    "DerivedStore",
    "create_store",
    "create_derived_store",
    "PagingStore",
    "create_paging_store",
    "create_storage_paging_store",
    "StoragePersistor",
    "create_storage_persistor",
    "PagingError",
    "InvalidCallbackError",
    "InvalidPagingDataError",
    "StorageError",
]
