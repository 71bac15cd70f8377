"""
models/result.py
----------------
Explicit success/failure values returned by repositories and services.
Expected failures (duplicate id, missing id, bad quantity, bad input file)
are reported through `Result` instead of being raised.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Generic, Optional, TypeVar

T = TypeVar("T")


class ErrorKind(str, Enum):
    """Closed set of failure categories."""
    DUPLICATE_KEY = "duplicate_key"
    NOT_FOUND = "not_found"
    INVALID_QUANTITY = "invalid_quantity"
    MALFORMED_RECORD = "malformed_record"
    UNPARSABLE_FIELD = "unparsable_field"
    FILE_ABSENT = "file_absent"
    FILE_UNREADABLE = "file_unreadable"
    IO_FAILURE = "io_failure"
    INSUFFICIENT_FUNDS = "insufficient_funds"

    @property
    def label(self) -> str:
        """Category tag used when logging the failure, e.g. ``[Duplicate]``."""
        return f"[{_LABELS[self]}]"


_LABELS = {
    ErrorKind.DUPLICATE_KEY: "Duplicate",
    ErrorKind.NOT_FOUND: "NotFound",
    ErrorKind.INVALID_QUANTITY: "InvalidQuantity",
    ErrorKind.MALFORMED_RECORD: "MissingField",
    ErrorKind.UNPARSABLE_FIELD: "InvalidFormat",
    ErrorKind.FILE_ABSENT: "FileNotFound",
    ErrorKind.FILE_UNREADABLE: "FileUnreadable",
    ErrorKind.IO_FAILURE: "IOFailure",
    ErrorKind.INSUFFICIENT_FUNDS: "InsufficientFunds",
}


@dataclass(frozen=True)
class AppError:
    """
    A tagged failure.

    Attributes:
        kind: The failure category.
        message: Human-readable description.
    """
    kind: ErrorKind
    message: str

    def __str__(self) -> str:
        return f"{self.kind.label} {self.message}"


@dataclass(frozen=True)
class Result(Generic[T]):
    """
    Outcome of an operation: either a value or an `AppError`.

    Check `ok` before reading `value`; on failure `value` is None and
    `error` describes what went wrong.
    """
    value: Optional[T] = None
    error: Optional[AppError] = None

    @property
    def ok(self) -> bool:
        return self.error is None

    @classmethod
    def success(cls, value: Optional[T] = None) -> "Result[T]":
        return cls(value=value)

    @classmethod
    def failure(cls, kind: ErrorKind, message: str) -> "Result[T]":
        return cls(error=AppError(kind, message))
