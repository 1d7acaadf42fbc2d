from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class PagingData(BaseModel):
    """Raw paging input, always stored normalized."""

    model_config = ConfigDict(frozen=True)

    total: int = Field(default=0, ge=0)
    limit: int = Field(default=10, ge=1)  # a.k.a. items per page
    offset: int = Field(default=0, ge=0)


class PagingCalcResult(BaseModel):
    """Navigation metadata derived from a PagingData.

    Serialises to camelCase (``pageCount``, ``isFirst``...) with
    ``model_dump(by_alias=True)``; accepts either shape on input.
    """

    model_config = ConfigDict(
        frozen=True,
        alias_generator=to_camel,
        populate_by_name=True,
    )

    total: int
    limit: int
    offset: int
    is_last: bool
    is_first: bool
    next_page: int | None
    previous_page: int | None
    has_next: bool
    has_previous: bool
    next_offset: int
    previous_offset: int
    current_page: int
    page_count: int
    first_offset: int = 0
    last_offset: int
