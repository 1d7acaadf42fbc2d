from typing import Any


class PagingError(Exception):
    """Base paging error with consistent schema."""

    def __init__(
        self,
        message: str,
        code: str = "ERROR",
        details: dict[str, Any] | None = None,
    ):
        self.message = message
        self.code = code
        self.details = details or {}
        super().__init__(message)

    def to_dict(self) -> dict[str, Any]:
        return {
            "error": {
                "message": self.message,
                "code": self.code,
                "details": self.details,
            }
        }


class InvalidCallbackError(PagingError, TypeError):
    def __init__(self, name: str, value: Any):
        super().__init__(
            f"{name} must be callable, got {type(value).__name__}",
            code="INVALID_CALLBACK",
            details={"argument": name, "type": type(value).__name__},
        )


class InvalidPagingDataError(PagingError, TypeError):
    def __init__(self, value: Any):
        super().__init__(
            f"Paging data must be a mapping, got {type(value).__name__}",
            code="INVALID_PAGING_DATA",
            details={"type": type(value).__name__},
        )


class StorageError(PagingError):
    def __init__(self, message: str = "Storage error", details: dict[str, Any] | None = None):
        super().__init__(message, code="STORAGE_ERROR", details=details)


def ensure_callable(name: str, value: Any) -> None:
    """Fail fast on a non-callable listener, transform or hook."""
    if not callable(value):
        raise InvalidCallbackError(name, value)
