"""Storage factory functions."""

import os
from pathlib import Path
from typing import Optional

from compustore.database.base import Storage
from compustore.database.sqlalchemy_db import SQLAlchemyStorage
from compustore.database.textfile import TextFileStorage

BACKENDS = ("text", "sqlite")


def default_data_dir() -> Path:
    """Return the data directory from COMPUSTORE_DATA_DIR or ~/.compustore."""
    data_dir = os.environ.get("COMPUSTORE_DATA_DIR")
    if data_dir is None:
        return Path.home() / ".compustore"
    return Path(data_dir)


def create_text_storage(data_dir: Optional[str] = None) -> TextFileStorage:
    """Create a text file storage.

    Args:
        data_dir: Directory for the record files. If None, checks
            COMPUSTORE_DATA_DIR, then defaults to ~/.compustore

    Returns:
        TextFileStorage instance
    """
    path = Path(data_dir) if data_dir is not None else default_data_dir()
    path.mkdir(parents=True, exist_ok=True)
    return TextFileStorage(str(path))


def create_sqlite_storage(database_path: Optional[str] = None) -> SQLAlchemyStorage:
    """Create a SQLite storage.

    Args:
        database_path: Path to SQLite database file. If None, uses
            compustore.db inside the default data directory

    Returns:
        SQLAlchemyStorage instance configured for SQLite
    """
    if database_path is None:
        data_dir = default_data_dir()
        data_dir.mkdir(parents=True, exist_ok=True)
        database_path = str(data_dir / "compustore.db")

    return SQLAlchemyStorage(f"sqlite:///{database_path}")


def create_storage(backend: str = "text", data_dir: Optional[str] = None) -> Storage:
    """Create the storage for a backend name.

    The sqlite backend keeps compustore.db inside ``data_dir``.

    Raises:
        ValueError: If the backend is unknown
    """
    if backend == "text":
        return create_text_storage(data_dir)
    if backend == "sqlite":
        if data_dir is None:
            return create_sqlite_storage()
        Path(data_dir).mkdir(parents=True, exist_ok=True)
        return create_sqlite_storage(str(Path(data_dir) / "compustore.db"))
    raise ValueError(f"Unknown storage backend '{backend}'. Supported: {', '.join(BACKENDS)}")
