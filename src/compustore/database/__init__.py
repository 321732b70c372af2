"""Database layer for compustore application."""

from compustore.database.base import CorruptRecordError, EntityKind, Storage
from compustore.database.factories import create_sqlite_storage, create_storage, create_text_storage
from compustore.database.persistence import load_store, save_store
from compustore.database.record_store import RecordStore

__all__ = [
    "CorruptRecordError",
    "EntityKind",
    "Storage",
    "RecordStore",
    "create_sqlite_storage",
    "create_storage",
    "create_text_storage",
    "load_store",
    "save_store",
]
