"""
Domain repository interfaces

Contains the abstract persistence port the use cases depend on.
"""

from .record_store import Collection, Record, RecordStore, SortSpec

__all__ = [
    'Collection',
    'Record',
    'RecordStore',
    'SortSpec',
]
