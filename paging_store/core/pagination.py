"""Pagination helpers: input normalization and navigation metadata."""

import re
from typing import Any, Mapping

from pydantic import BaseModel

from paging_store.core.exceptions import InvalidPagingDataError
from paging_store.models.paging import PagingCalcResult, PagingData

DEFAULT_LIMIT = 10

_LEADING_INT = re.compile(r"[+-]?[0-9]+")


def number_or(value: Any, fallback: int = 0) -> int:
    """Parse leading base-10 digits of ``value``; return ``fallback`` if there are none."""
    if value is None or isinstance(value, bool):
        return fallback
    if isinstance(value, int):
        return value
    m = _LEADING_INT.match(str(value).lstrip())
    return int(m.group()) if m else fallback


def as_mapping(data: Any) -> Mapping[str, Any]:
    """Accept None, a mapping or a pydantic model as partial paging data."""
    if data is None:
        return {}
    if isinstance(data, BaseModel):
        return data.model_dump(exclude_unset=True)
    if isinstance(data, Mapping):
        return data
    raise InvalidPagingDataError(data)


def normalize(data: Any = None, default_limit: Any = None) -> PagingData:
    """Clamp total/offset to >= 0 and limit to >= 1, filling gaps with defaults."""
    d = as_mapping(data)
    return PagingData(
        total=max(0, number_or(d.get("total"), 0)),
        limit=max(1, number_or(d.get("limit"), number_or(default_limit, DEFAULT_LIMIT))),
        offset=max(0, number_or(d.get("offset"), 0)),
    )


def page_from_offset(total: int, limit: int, offset: int) -> int:
    """Return the 1-indexed page containing the item after ``offset``."""
    # negative offset counts back from the end
    if offset < 0:
        offset = max(0, total + offset)
    # offset is the number of rows skipped
    offset += 1
    return max(-(-offset // limit), 1)


def offset_from_page(total: int, limit: int, offset: int, page: Any = None) -> int:
    """Return the offset at which ``page`` starts (current page if ``page`` is invalid)."""
    page = number_or(page, page_from_offset(total, limit, offset))
    return max(limit * (page - 1), 0)


def calculate_paging(data: Any = None) -> PagingCalcResult:
    """
    Compute navigation metadata for ``data`` (total, limit, offset).

    Input is normalized first: missing or non-numeric values fall back to
    total=0, limit=10, offset=0. With no items the single empty page is both
    first and last.
    """
    p = normalize(data)
    total, limit, offset = p.total, p.limit, p.offset

    page_count = -(-total // limit)
    current_page = page_from_offset(total, limit, offset)
    is_first = current_page == 1
    is_last = page_count == 0 or current_page == page_count

    next_page = current_page + 1 if page_count >= current_page + 1 else None
    has_next = next_page is not None
    next_offset = (current_page if has_next else current_page - 1) * limit

    previous_page = max(0, min(current_page - 1, page_count - 1)) or None
    has_previous = previous_page is not None
    previous_offset = 0 if previous_page is None else (previous_page - 1) * limit

    return PagingCalcResult(
        total=total,
        limit=limit,
        offset=offset,
        is_last=is_last,
        is_first=is_first,
        next_page=next_page,
        previous_page=previous_page,
        has_next=has_next,
        has_previous=has_previous,
        next_offset=next_offset,
        previous_offset=previous_offset,
        current_page=current_page,
        page_count=page_count,
        first_offset=0,
        last_offset=offset_from_page(total, limit, offset, page_count),
    )
