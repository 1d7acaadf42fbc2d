from typing import Any, Callable

from pydantic import BaseModel, ConfigDict, field_validator

from paging_store.core.exceptions import ensure_callable


class StoreOptions(BaseModel):
    """Optional hooks for a store; ``persist`` receives every new value."""

    model_config = ConfigDict(arbitrary_types_allowed=True)

    persist: Callable[[Any], Any] | None = None

    @field_validator("persist", mode="before")
    @classmethod
    def _persist_callable(cls, v: Any) -> Any:
        if v is not None:
            ensure_callable("persist", v)
        return v
