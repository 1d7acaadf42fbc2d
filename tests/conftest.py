import os
from typing import Generator

import pytest

# Keep tests independent of any local .env
os.environ.setdefault("PAGING_DEFAULT_LIMIT", "10")
os.environ.setdefault("PAGING_STORAGE_BACKEND", "session")


@pytest.fixture(autouse=True)
def settings_cache() -> Generator:
    from paging_store.core.config import get_settings
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture(autouse=True)
def session_storage() -> Generator:
    from paging_store.storage.memory import clear_session_storage
    clear_session_storage()
    yield
    clear_session_storage()


@pytest.fixture
def local_storage_path(tmp_path, monkeypatch) -> str:
    from paging_store.core.config import get_settings
    path = str(tmp_path / "paging")
    monkeypatch.setenv("PAGING_STORAGE_PATH", path)
    get_settings.cache_clear()
    return path


@pytest.fixture
def first() -> dict:
    return dict(
        total=25,
        limit=10,
        offset=0,
        is_last=False,
        is_first=True,
        next_page=2,
        previous_page=None,
        has_next=True,
        has_previous=False,
        next_offset=10,
        previous_offset=0,
        current_page=1,
        page_count=3,
        first_offset=0,
        last_offset=20,
    )


@pytest.fixture
def middle() -> dict:
    return dict(
        total=25,
        limit=10,
        offset=11,
        is_last=False,
        is_first=False,
        next_page=3,
        previous_page=1,
        has_next=True,
        has_previous=True,
        next_offset=20,
        previous_offset=0,
        current_page=2,
        page_count=3,
        first_offset=0,
        last_offset=20,
    )


@pytest.fixture
def last() -> dict:
    return dict(
        total=25,
        limit=10,
        offset=23,
        is_last=True,
        is_first=False,
        next_page=None,
        previous_page=2,
        has_next=False,
        has_previous=True,
        next_offset=20,
        previous_offset=10,
        current_page=3,
        page_count=3,
        first_offset=0,
        last_offset=20,
    )


@pytest.fixture(scope="session", autouse=True)
def logging_configured() -> None:
    from paging_store.core.logging import configure_logging
    configure_logging(debug=False)
