"""
Abstract data-source interfaces for stockroom.

A record store reads its initial contents from exactly one source and
writes every mutation through it. Concrete sources (the fixed seed and the
remote PostgreSQL backend) implement the RecordSource protocol; stores pick
one once, at construction, instead of checking configuration per call.
"""

from __future__ import annotations

import abc
from typing import List, Protocol, runtime_checkable

from stockroom.domain.collections import CollectionSpec
from stockroom.domain.models import Record


@runtime_checkable
class RecordSource(Protocol):
    """
    Common interface all data sources must implement.

    Attributes
    ----------
    kind : str
        A short machine-friendly identifier ("seed", "remote").
    collection : CollectionSpec
        The collection whose records the source serves.
    """

    kind: str
    collection: CollectionSpec

    def fetch_all(self) -> List[Record]:
        """
        Read every record of the collection, in source order.

        Raises
        ------
        BackendError
            If the records cannot be read.
        """
        ...

    def insert(self, record: Record) -> Record:
        """Persist a new record and return the stored version."""
        ...

    def update(self, record: Record) -> Record:
        """Persist a replaced record and return the stored version."""
        ...

    def delete(self, record_id: str) -> None:
        """Remove a record by identifier."""
        ...

    def close(self) -> None:
        """Release any resources held by the source."""
        ...


class AbstractRecordSource(abc.ABC):
    """
    Optional ABC helper for class-based implementations.

    Subclasses set `kind` and implement the four data operations.
    """

    kind: str

    def __init__(self, collection: CollectionSpec) -> None:
        self.collection = collection

    @abc.abstractmethod
    def fetch_all(self) -> List[Record]:  # pragma: no cover - interface only
        raise NotImplementedError

    @abc.abstractmethod
    def insert(self, record: Record) -> Record:  # pragma: no cover - interface only
        raise NotImplementedError

    @abc.abstractmethod
    def update(self, record: Record) -> Record:  # pragma: no cover - interface only
        raise NotImplementedError

    @abc.abstractmethod
    def delete(self, record_id: str) -> None:  # pragma: no cover - interface only
        raise NotImplementedError

    def close(self) -> None:
        """Sources without resources have nothing to release."""

    def __repr__(self) -> str:
        return f"{type(self).__name__}(collection={self.collection.name!r})"


__all__ = ["AbstractRecordSource", "RecordSource"]
