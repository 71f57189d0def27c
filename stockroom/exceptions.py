"""
Exception hierarchy for stockroom.

Every failure raised by the store, the query layer and the data sources
derives from StockroomError. None of them is fatal: callers surface the
message and let the user retry the originating action.
"""

from __future__ import annotations

from typing import Iterable, List, Optional


class StockroomError(Exception):
    """Base class for all stockroom errors."""


class UnknownCollectionError(StockroomError, KeyError):
    """Raised when a collection name is not registered."""

    def __init__(self, name: str, available: Iterable[str]) -> None:
        self.name = name
        self.available = sorted(available)
        super().__init__(f"Unknown collection '{name}'. Available: {', '.join(self.available)}")

    def __str__(self) -> str:
        return self.args[0]


class InvalidFilterError(StockroomError, ValueError):
    """Raised for an unknown filter name or a value outside its choices."""


class RecordValidationError(StockroomError, ValueError):
    """
    A mutation input violates a required-field or value invariant.

    Raised before any state change. `reasons` holds one human-readable entry
    per violated field.
    """

    def __init__(self, collection: str, reasons: Iterable[str]) -> None:
        self.collection = collection
        self.reasons: List[str] = list(reasons)
        super().__init__(f"Invalid {collection} record: {'; '.join(self.reasons)}")


class DuplicateRecordError(RecordValidationError):
    """An add() supplied an identifier that is already stored."""

    def __init__(self, collection: str, record_id: str) -> None:
        self.record_id = record_id
        super().__init__(collection, [f"id '{record_id}' already exists"])


class RecordNotFoundError(StockroomError, LookupError):
    """update() or remove() referenced an identifier that is not stored."""

    def __init__(self, collection: str, record_id: str) -> None:
        self.collection = collection
        self.record_id = record_id
        super().__init__(f"No {collection} record with id '{record_id}'")


class BackendError(StockroomError):
    """The remote backend is unreachable or returned an error."""

    def __init__(self, message: str, table: Optional[str] = None) -> None:
        self.table = table
        super().__init__(message)


class RemoteWriteError(StockroomError):
    """A remote insert/update/delete failed; local state was left unchanged."""

    def __init__(self, collection: str, operation: str, cause: BaseException) -> None:
        self.collection = collection
        self.operation = operation
        self.cause = cause
        super().__init__(f"Could not {operation} {collection} record on backend: {cause}")


__all__ = [
    "StockroomError",
    "UnknownCollectionError",
    "InvalidFilterError",
    "RecordValidationError",
    "DuplicateRecordError",
    "RecordNotFoundError",
    "BackendError",
    "RemoteWriteError",
]
