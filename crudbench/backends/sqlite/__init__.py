##############################################################################
# Copyright (c) crudbench developers. See the top-level LICENSE file for
# dates and other details. No copyright assignment is required to contribute
# to crudbench.
##############################################################################

"""
SQLite-based persistence layer for crudbench.

This package provides everything needed to persist the benchmark entities through
SQLAlchemy into an embedded SQLite database: connection handling, a generic
store base and the concrete stores for each entity type.

Modules:
    sqlite_connection: Owns the SQLAlchemy engine and the database file.
    sqlite_store_base: Defines a generic base class for entity stores.
    sqlite_stores: Contains concrete SQLite store classes for crudbench models.
"""
