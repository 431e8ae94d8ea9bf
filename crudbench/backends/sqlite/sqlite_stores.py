##############################################################################
# Copyright (c) crudbench developers. See the top-level LICENSE file for
# dates and other details. No copyright assignment is required to contribute
# to crudbench.
##############################################################################

"""
SQLite store implementations for crudbench entity models.

This module defines concrete `SQLiteStoreBase` subclasses, each bound to a specific
model and table.

See also:
    - crudbench.backends.sqlite.sqlite_store_base: Base class
    - crudbench.db_scripts.data_models: Data model definitions
"""

from crudbench.backends.sqlite.sqlite_connection import SQLiteConnectionSource
from crudbench.backends.sqlite.sqlite_store_base import SQLiteStoreBase
from crudbench.db_scripts.data_models import MinimalEntity, SimpleEntityNotNull


class SQLiteSimpleEntityNotNullStore(SQLiteStoreBase[SimpleEntityNotNull]):
    """
    A SQLite-based store for managing [`SimpleEntityNotNull`][db_scripts.data_models.SimpleEntityNotNull]
    objects. Generated identifiers are written back on insert so entities can be updated afterwards.
    """

    def __init__(self, connection_source: SQLiteConnectionSource):
        """Initialize the `SQLiteSimpleEntityNotNullStore`."""
        super().__init__(connection_source, SimpleEntityNotNull, write_back_ids=True)


class SQLiteMinimalEntityStore(SQLiteStoreBase[MinimalEntity]):
    """
    A SQLite-based store for managing [`MinimalEntity`][db_scripts.data_models.MinimalEntity]
    objects. Generated identifiers are not written back on insert.
    """

    def __init__(self, connection_source: SQLiteConnectionSource):
        """Initialize the `SQLiteMinimalEntityStore`."""
        super().__init__(connection_source, MinimalEntity, write_back_ids=False)
