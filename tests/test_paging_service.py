"""Unit tests for the reactive paging store."""

import pytest

from paging_store.core.exceptions import InvalidCallbackError, InvalidPagingDataError
from paging_store.models.paging import PagingCalcResult, PagingData
from paging_store.models.store import StoreOptions
from paging_store.services.paging import create_paging_store


def test_store_publishes_snapshots_in_order(first, middle, last):
    s = create_paging_store({"total": 25, "limit": 10, "offset": 0})

    log = []
    unsub = s.subscribe(log.append)

    s.update({"total": 25, "limit": 10, "offset": 11})
    s.update({"total": 25, "limit": 10, "offset": 23})

    assert [p.model_dump() for p in log] == [first, middle, last]
    unsub()


def test_update_merges_over_current_input():
    s = create_paging_store({"total": 25, "limit": 10, "offset": 0})
    s.update({"offset": 11})
    assert s.data == PagingData(total=25, limit=10, offset=11)
    s.update({"total": 100})
    assert s.data == PagingData(total=100, limit=10, offset=11)
    assert s.get().current_page == 2


def test_update_accepts_paging_data_and_none():
    s = create_paging_store({"total": 25, "limit": 10, "offset": 0})
    s.update(PagingData(total=40, limit=20, offset=20))
    assert s.get().current_page == 2
    s.update()
    assert s.data == PagingData(total=40, limit=20, offset=20)


def test_update_with_none_value_redefaults_field():
    s = create_paging_store({"total": 25, "limit": 5, "offset": 11}, default_limit=20)
    s.update({"limit": None, "offset": None})
    assert s.data == PagingData(total=25, limit=20, offset=0)


def test_update_normalizes_invalid_values():
    s = create_paging_store({"total": 25, "limit": 10, "offset": 0})
    s.update({"total": -1, "limit": "0", "offset": "abc"})
    assert s.data == PagingData(total=0, limit=1, offset=0)


def test_update_rejects_non_mapping():
    s = create_paging_store()
    with pytest.raises(InvalidPagingDataError) as exc:
        s.update(11)
    assert exc.value.code == "INVALID_PAGING_DATA"


def test_default_limit_applies_on_construction():
    assert create_paging_store({"total": 100}, default_limit=25).get().limit == 25
    assert create_paging_store({"total": 100}).get().limit == 10


def test_default_limit_from_settings(monkeypatch):
    from paging_store.core.config import get_settings
    monkeypatch.setenv("PAGING_DEFAULT_LIMIT", "50")
    get_settings.cache_clear()
    s = create_paging_store({"total": 100})
    assert s.default_limit == 50
    assert s.get().page_count == 2


def test_reset_replaces_input():
    s = create_paging_store({"total": 25, "limit": 5, "offset": 20}, default_limit=20)
    s.reset()
    assert s.data == PagingData(total=0, limit=20, offset=0)
    s.reset(7)
    assert s.data == PagingData(total=0, limit=7, offset=0)
    s.reset(0)
    assert s.data.limit == 1


def test_reset_notifies_subscribers():
    s = create_paging_store({"total": 25, "limit": 10, "offset": 23})
    log = []
    s.subscribe(log.append)
    s.reset()
    assert len(log) == 2
    assert log[-1].total == 0
    assert log[-1].is_first and log[-1].is_last


def test_get_returns_current_snapshot():
    s = create_paging_store({"total": 25, "limit": 10, "offset": 0})
    assert isinstance(s.get(), PagingCalcResult)
    s.update({"offset": 23})
    assert s.get().is_last


def test_persist_receives_results_not_input(middle):
    persisted = []
    s = create_paging_store(
        {"total": 25, "limit": 10, "offset": 0},
        store_options=StoreOptions(persist=persisted.append),
    )
    assert persisted == []
    s.update({"offset": 11})
    assert len(persisted) == 1
    assert isinstance(persisted[0], PagingCalcResult)
    assert persisted[0].model_dump() == middle


def test_persist_error_propagates_to_update():
    def fail(result):
        raise OSError("read-only")

    s = create_paging_store({"total": 25}, store_options=StoreOptions(persist=fail))
    with pytest.raises(OSError, match="read-only"):
        s.update({"offset": 11})


def test_subscribe_rejects_non_callable():
    s = create_paging_store()
    with pytest.raises(InvalidCallbackError):
        s.subscribe("not a function")


def test_unsubscribe_stops_notifications():
    s = create_paging_store({"total": 25})
    log = []
    unsub = s.subscribe(log.append)
    unsub()
    unsub()
    s.update({"offset": 11})
    assert len(log) == 1


def test_subscriber_can_update_reentrantly():
    s = create_paging_store({"total": 25, "limit": 10, "offset": 0})
    pages = []

    def clamp_to_last(p):
        pages.append(p.current_page)
        if p.current_page > p.page_count > 0:
            s.update({"offset": p.last_offset})

    s.subscribe(clamp_to_last)
    s.update({"offset": 100})
    assert pages == [1, 11, 3]
    assert s.get().current_page == 3


def test_reentrant_update_reaches_every_subscriber_in_order():
    s = create_paging_store({"total": 100, "limit": 10, "offset": 0})
    pages_a, pages_b = [], []

    def jump_to_end(p):
        pages_a.append(p.current_page)
        if p.current_page == 5:
            s.update({"offset": 90})

    s.subscribe(jump_to_end)
    s.subscribe(lambda p: pages_b.append(p.current_page))
    s.update({"offset": 40})
    assert pages_a == [1, 5, 10]
    assert pages_b == [1, 5, 10]
    assert s.get().current_page == 10
