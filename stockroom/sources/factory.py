"""
Source selection: the single capability check between seed and backend.
"""

from __future__ import annotations

from typing import Optional

from stockroom.config import Settings, get_settings
from stockroom.domain.collections import CollectionSpec
from stockroom.sources.abstract import RecordSource
from stockroom.sources.remote import RemoteSource
from stockroom.sources.seed import FixedSeedSource
from stockroom.utils.logging import get_logger

log = get_logger(__name__)


def select_source(collection: CollectionSpec, settings: Optional[Settings] = None) -> RecordSource:
    """
    Pick the data source for a collection.

    Parameters
    ----------
    collection : CollectionSpec
        Collection the source will serve.
    settings : Settings | None
        Settings to inspect. Defaults to the cached settings.

    Returns
    -------
    RecordSource
        A RemoteSource when the backend is configured and the collection is
        stored, otherwise a FixedSeedSource.
    """
    settings = settings or get_settings()
    if collection.derived or not settings.backend_configured:
        log.debug(
            f"Using seed data for {collection.name}",
            extra={"collection": collection.name, "backend_enabled": settings.backend_enabled},
        )
        return FixedSeedSource(collection)
    return RemoteSource(collection, settings=settings)


__all__ = ["select_source"]
