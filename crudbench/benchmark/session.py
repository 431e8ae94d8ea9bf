##############################################################################
# Copyright (c) crudbench developers. See the top-level LICENSE file for
# dates and other details. No copyright assignment is required to contribute
# to crudbench.
##############################################################################

"""
Scoped acquisition of the database a benchmark runs against.

The `benchmark_session` context manager gives a benchmark exclusive ownership of a
fresh SQLite database and guarantees that the database file is removed again on
both normal and exceptional exit.
"""

import logging
import os
from contextlib import contextmanager
from dataclasses import dataclass
from types import SimpleNamespace
from typing import Iterator, Optional

from crudbench.backends.sqlite.sqlite_connection import SQLiteConnectionSource
from crudbench.backends.sqlite.sqlite_stores import SQLiteMinimalEntityStore, SQLiteSimpleEntityNotNullStore
from crudbench.exceptions import BenchmarkSetupError, PersistenceError
from crudbench.utils import expand_path, get_yaml_var


LOG = logging.getLogger(__name__)


@dataclass
class BenchmarkSession:
    """
    The resources a benchmark runs against.

    Attributes:
        connection_source: The source of the engine shared by both stores.
        entity_store: The store for `SimpleEntityNotNull` entities.
        minimal_store: The store for `MinimalEntity` entities.
    """

    connection_source: SQLiteConnectionSource
    entity_store: SQLiteSimpleEntityNotNullStore
    minimal_store: SQLiteMinimalEntityStore


def get_database_path(database: SimpleNamespace) -> Optional[str]:
    """
    Work out where the database file lives from the `database` section of the configuration.

    Args:
        database: The `database` section of a [`Config`][config.Config] object.

    Returns:
        The absolute path to the database file, or None for an in-memory database.
    """
    if get_yaml_var(database, "in_memory", False):
        return None
    directory = expand_path(get_yaml_var(database, "directory", os.getcwd()))
    return os.path.join(directory, get_yaml_var(database, "name", "test-db"))


@contextmanager
def benchmark_session(database: SimpleNamespace) -> Iterator[BenchmarkSession]:
    """
    Open a fresh database, create the benchmark tables and yield the stores.

    Any database file left behind by an earlier run is removed first. The engine is
    disposed of and the database file is removed once the block exits, whether it
    exits normally or with an exception.

    Args:
        database: The `database` section of a [`Config`][config.Config] object.

    Yields:
        A `BenchmarkSession` holding the connection source and both stores.

    Raises:
        BenchmarkSetupError: If the database or its tables can't be created.
    """
    source = SQLiteConnectionSource(
        db_path=get_database_path(database),
        journal_mode=get_yaml_var(database, "journal_mode", "WAL"),
        echo=get_yaml_var(database, "echo", False),
    )
    LOG.debug(f"Setting up benchmark database at '{source.url}'...")

    try:
        try:
            if source.delete_database():
                LOG.info(f"Removed stale benchmark database '{source.db_path}'.")
            source.open()
            session = BenchmarkSession(
                connection_source=source,
                entity_store=SQLiteSimpleEntityNotNullStore(source),
                minimal_store=SQLiteMinimalEntityStore(source),
            )
        except (OSError, PersistenceError) as exc:
            raise BenchmarkSetupError(f"Unable to prepare the benchmark database at '{source.url}': {exc}") from exc
        yield session
    finally:
        source.close()
        source.delete_database()
        LOG.debug(f"Tore down benchmark database at '{source.url}'.")
