##############################################################################
# Copyright (c) crudbench developers. See the top-level LICENSE file for
# dates and other details. No copyright assignment is required to contribute
# to crudbench.
##############################################################################

"""
SQLite connection source for crudbench.

This module defines the `SQLiteConnectionSource` class, which owns the SQLAlchemy
engine used by every store. It configures each new SQLite connection (journal mode,
foreign key support), supports both file-backed and in-memory databases, and can
remove the database file along with its journal files once a benchmark is done.
"""

import logging
import os
from pathlib import Path
from types import TracebackType
from typing import Optional, Type

from sqlalchemy import create_engine, event, text
from sqlalchemy.engine import Engine
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.pool import StaticPool

from crudbench.exceptions import BenchmarkSetupError


LOG = logging.getLogger(__name__)

DATABASE_FILE_SUFFIXES = ("", "-journal", "-wal", "-shm")
JOURNAL_MODES = ("DELETE", "TRUNCATE", "PERSIST", "MEMORY", "WAL", "OFF")


class SQLiteConnectionSource:
    """
    Context manager owning the SQLAlchemy engine for one SQLite database.

    When `db_path` is None the database lives in memory. A single connection is
    then shared through a `StaticPool` so every store sees the same tables.

    Attributes:
        db_path (Optional[str]): The path to the database file, or None for an in-memory database.
        journal_mode (str): The SQLite journal mode applied to file databases.
        echo (bool): If True, SQLAlchemy logs every statement it emits.

    Methods:
        open: Create the engine.
        close: Dispose of the engine and every pooled connection.
        get_version: Query SQLite for its version.
        delete_database: Remove the database file and its journal files.
    """

    def __init__(self, db_path: Optional[str] = None, journal_mode: str = "WAL", echo: bool = False):
        """
        Initialize the connection source. No connection is opened until `open` is called.

        Args:
            db_path: The path to the database file, or None for an in-memory database.
            journal_mode: The SQLite journal mode applied to file databases.
            echo: If True, SQLAlchemy logs every statement it emits.

        Raises:
            BenchmarkSetupError: If `journal_mode` isn't a journal mode SQLite knows.
        """
        if str(journal_mode).upper() not in JOURNAL_MODES:
            raise BenchmarkSetupError(
                f"Invalid SQLite journal mode {journal_mode!r}. Expected one of: {', '.join(JOURNAL_MODES)}."
            )
        self.db_path: Optional[str] = db_path
        self.journal_mode: str = str(journal_mode).upper()
        self.echo: bool = echo
        self._engine: Optional[Engine] = None

    @property
    def in_memory(self) -> bool:
        """True if this source points at an in-memory database."""
        return self.db_path is None

    @property
    def url(self) -> str:
        """The SQLAlchemy URL of the database."""
        return "sqlite://" if self.in_memory else f"sqlite:///{self.db_path}"

    @property
    def engine(self) -> Engine:
        """
        The engine of this source.

        Raises:
            BenchmarkSetupError: If the source hasn't been opened.
        """
        if self._engine is None:
            raise BenchmarkSetupError("The SQLite connection source has not been opened.")
        return self._engine

    def _configure_connection(self, dbapi_connection, connection_record):  # pylint: disable=unused-argument
        """
        Apply the pragmas crudbench relies on to a newly created DBAPI connection.

        Args:
            dbapi_connection: The raw sqlite3 connection.
            connection_record: The pool record of the connection.
        """
        cursor = dbapi_connection.cursor()
        if not self.in_memory:
            cursor.execute(f"PRAGMA journal_mode={self.journal_mode}")
        cursor.execute("PRAGMA foreign_keys=ON")
        cursor.close()

    def open(self) -> Engine:
        """
        Create the engine and check that the database can be reached.

        Returns:
            The SQLAlchemy engine.

        Raises:
            BenchmarkSetupError: If the database directory or the database itself can't be created.
        """
        if self._engine is not None:
            return self._engine

        engine_kwargs = {"echo": self.echo, "connect_args": {"check_same_thread": False}}
        try:
            if self.in_memory:
                engine_kwargs["poolclass"] = StaticPool
            else:
                Path(self.db_path).parent.mkdir(parents=True, exist_ok=True)

            engine = create_engine(self.url, **engine_kwargs)
            event.listen(engine, "connect", self._configure_connection)
            with engine.connect() as conn:
                conn.execute(text("SELECT 1"))
        except (OSError, SQLAlchemyError) as exc:
            raise BenchmarkSetupError(f"Unable to open the SQLite database at '{self.url}': {exc}") from exc

        LOG.debug(f"Opened SQLite database at '{self.url}'.")
        self._engine = engine
        return engine

    def close(self):
        """Dispose of the engine and every pooled connection."""
        if self._engine is not None:
            self._engine.dispose()
            self._engine = None
            LOG.debug(f"Closed SQLite database at '{self.url}'.")

    def get_version(self) -> str:
        """
        Query SQLite for the current version.

        Returns:
            The SQLite version string.
        """
        with self.engine.connect() as conn:
            return conn.execute(text("SELECT sqlite_version()")).scalar_one()

    def delete_database(self) -> bool:
        """
        Remove the database file along with its journal, WAL and shared-memory files.
        Does nothing for an in-memory database.

        Returns:
            True if the main database file existed and was removed, False otherwise.
        """
        if self.in_memory:
            return False

        existed = os.path.exists(self.db_path)
        for suffix in DATABASE_FILE_SUFFIXES:
            path = f"{self.db_path}{suffix}"
            if os.path.exists(path):
                os.remove(path)
                LOG.debug(f"Removed database file '{path}'.")
        return existed

    def __enter__(self) -> "SQLiteConnectionSource":
        """
        Enters the runtime context related to this object and opens the engine.

        Returns:
            This connection source.
        """
        self.open()
        return self

    def __exit__(self, exc_type: Type[Exception], exc_value: Exception, traceback: TracebackType):
        """
        Exits the runtime context and disposes of the engine.

        Args:
            exc_type: The exception type raised, if any.
            exc_value: The exception instance raised, if any.
            traceback: The traceback object, if an exception was raised.
        """
        self.close()
