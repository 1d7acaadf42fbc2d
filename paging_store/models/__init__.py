from paging_store.models.paging import PagingCalcResult, PagingData
from paging_store.models.store import StoreOptions

__all__ = [
    "PagingData",
    "PagingCalcResult",
    "StoreOptions",
]
