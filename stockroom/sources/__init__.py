"""
Sources package for stockroom.

Re-exports the data-source interfaces, the two concrete sources and the
selection helper so stores can import from `stockroom.sources` directly.
"""

from stockroom.sources.abstract import AbstractRecordSource, RecordSource
from stockroom.sources.factory import select_source
from stockroom.sources.remote import RemoteSource
from stockroom.sources.seed import FixedSeedSource, seed_records

__all__ = [
    # Abstracts
    "AbstractRecordSource",
    "RecordSource",
    # Concrete sources
    "FixedSeedSource",
    "RemoteSource",
    # Helpers
    "seed_records",
    "select_source",
]
