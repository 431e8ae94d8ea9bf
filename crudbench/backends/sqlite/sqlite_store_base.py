##############################################################################
# Copyright (c) crudbench developers. See the top-level LICENSE file for
# dates and other details. No copyright assignment is required to contribute
# to crudbench.
##############################################################################

"""
SQLAlchemy-based generic store implementation for crudbench entities.

This module defines `SQLiteStoreBase`, a generic base class for persisting entities
into SQLite through SQLAlchemy. It provides the operations of the store contract
(create, update, retrieve, retrieve_all, call_batch_tasks, execute_raw) plus table
creation from the model's mapped table.

Writes go through SQLAlchemy Core so the caller's instance is never attached to a
session. Reads go through a short-lived ORM `Session`, so every query hydrates new
instances and no identity map survives between calls.

See also:
    - crudbench.backends.store_base: Base class
    - crudbench.backends.sqlite.sqlite_stores: Concrete store implementations
    - crudbench.db_scripts.data_models: Data model definitions
"""

import logging
from contextlib import contextmanager
from typing import Any, Callable, Generic, Iterator, List, Optional, Type

from sqlalchemy import func, insert, select, text, update
from sqlalchemy.engine import Connection
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from crudbench.backends.sqlite.sqlite_connection import SQLiteConnectionSource
from crudbench.backends.store_base import StoreBase, T
from crudbench.exceptions import EntityNotFoundError, PersistenceError


LOG = logging.getLogger(__name__)


class SQLiteStoreBase(StoreBase[T], Generic[T]):
    """
    Base class for SQLite-based stores.

    Attributes:
        connection_source (SQLiteConnectionSource): The source of the engine used by this store.
        model_class (Type[T]): The mapped class stored in this store.
        table_name (str): The name of the table backing this store.
        write_back_ids (bool): If True, `create` assigns the generated identifier to the
            caller's entity. If False the caller's entity is left untouched.

    Methods:
        create_table_if_not_exists: Create the backing table.
        create: Insert an entity into the database.
        update: Update the row of an existing entity.
        retrieve: Retrieve an entity from the database by ID.
        retrieve_all: Query the database for all entities of this type.
        call_batch_tasks: Run a unit of work inside one transaction.
        execute_raw: Execute a raw SQL statement.
        count: Count the rows in the backing table.
    """

    def __init__(self, connection_source: SQLiteConnectionSource, model_class: Type[T], write_back_ids: bool = True):
        """
        Initialize the store and create its table if needed.

        Args:
            connection_source: The source of the engine used by this store.
            model_class: The mapped class stored in this store.
            write_back_ids: Whether `create` assigns generated identifiers to the caller's entity.
        """
        self.connection_source: SQLiteConnectionSource = connection_source
        self.model_class: Type[T] = model_class
        self.table = model_class.__table__
        self.table_name: str = self.table.name
        self.write_back_ids: bool = write_back_ids
        self._batch_connection: Optional[Connection] = None
        self.create_table_if_not_exists()

    @property
    def in_batch(self) -> bool:
        """True while a `call_batch_tasks` unit of work is running."""
        return self._batch_connection is not None

    @contextmanager
    def _connection(self, action: str) -> Iterator[Connection]:
        """
        Provide the connection an operation should run on.

        Inside `call_batch_tasks` this is the connection of the running transaction.
        Otherwise a new transaction is started and committed once the block exits.

        Args:
            action: A description of the operation, used in error messages.

        Yields:
            A connection with an active transaction.

        Raises:
            PersistenceError: If SQLAlchemy raises an error.
        """
        if self._batch_connection is not None:
            try:
                yield self._batch_connection
            except SQLAlchemyError as exc:
                raise PersistenceError(f"Failed to {action} in '{self.table_name}': {exc}") from exc
            return

        try:
            with self.connection_source.engine.begin() as conn:
                yield conn
        except SQLAlchemyError as exc:
            raise PersistenceError(f"Failed to {action} in '{self.table_name}': {exc}") from exc

    @contextmanager
    def _session(self, action: str) -> Iterator[Session]:
        """
        Provide a short-lived ORM session bound to the connection an operation should run on.

        The session never commits or rolls back the connection it's given, and closing it
        detaches every instance it loaded.

        Args:
            action: A description of the operation, used in error messages.

        Yields:
            An ORM session.
        """
        with self._connection(action) as conn:
            with Session(bind=conn) as session:
                yield session

    def create_table_if_not_exists(self):
        """
        Create the table if it doesn't exist.
        """
        with self._connection("create the table") as conn:
            self.table.create(conn, checkfirst=True)
        LOG.debug(f"Ensured table '{self.table_name}' exists.")

    def create(self, entity: T):
        """
        Insert `entity` as a new row.

        An identifier already set on the entity is inserted as-is. Otherwise the
        database generates one, which is assigned to `entity.id` when this store
        writes back identifiers.

        Args:
            entity: The entity to insert.

        Raises:
            PersistenceError: If the insert fails.
        """
        values = entity.to_dict(include_id=entity.id is not None)
        stmt = insert(self.table)
        with self._connection("create an entity") as conn:
            result = conn.execute(stmt, values) if values else conn.execute(stmt)
            if self.write_back_ids:
                entity.id = result.inserted_primary_key[0]

    def update(self, entity: T):
        """
        Write every field of `entity` to the row with the same identifier.

        Args:
            entity: The entity to write.

        Raises:
            PersistenceError: If the entity has no identifier or the update fails.
            EntityNotFoundError: If no row has the entity's identifier.
        """
        if entity.id is None:
            raise PersistenceError(f"Cannot update a {self.table_name} entity that has no identifier.")

        values = entity.to_dict(include_id=False)
        if not values:
            # Nothing to write; the row still has to exist
            self.retrieve(entity.id)
            return

        stmt = update(self.table).where(self.table.c.id == entity.id).values(**values)
        with self._connection("update an entity") as conn:
            rowcount = conn.execute(stmt).rowcount
        if rowcount == 0:
            raise EntityNotFoundError(f"{self.table_name} with id '{entity.id}' does not exist in the database.")

    def retrieve(self, identifier: int) -> T:
        """
        Load the row with `identifier` into a new instance.

        Args:
            identifier: The identifier of the entity to retrieve.

        Returns:
            A newly constructed, detached entity.

        Raises:
            EntityNotFoundError: If no row has this identifier.
            PersistenceError: If the query fails.
        """
        with self._session("retrieve an entity") as session:
            entity = session.get(self.model_class, identifier)
        if entity is None:
            raise EntityNotFoundError(f"{self.table_name} with id '{identifier}' does not exist in the database.")
        return entity

    def retrieve_all(self) -> List[T]:
        """
        Load every row into new instances.

        Returns:
            A list of newly constructed, detached entities.

        Raises:
            PersistenceError: If the query fails.
        """
        with self._session("retrieve all entities") as session:
            return list(session.scalars(select(self.model_class)))

    def call_batch_tasks(self, unit_of_work: Callable[[], Any]) -> Any:
        """
        Run `unit_of_work` inside one transaction. Every operation this store runs
        while the unit of work executes joins that transaction. The transaction is
        committed if `unit_of_work` returns and rolled back if it raises.

        A call made while another unit of work is running joins the outer transaction.

        Args:
            unit_of_work: A callable taking no arguments that issues store operations.

        Returns:
            Whatever `unit_of_work` returns.

        Raises:
            PersistenceError: If the transaction can't be started or committed.
        """
        if self._batch_connection is not None:
            return unit_of_work()

        try:
            with self.connection_source.engine.begin() as conn:
                self._batch_connection = conn
                try:
                    return unit_of_work()
                finally:
                    self._batch_connection = None
        except SQLAlchemyError as exc:
            raise PersistenceError(f"Batch transaction on '{self.table_name}' failed: {exc}") from exc

    def execute_raw(self, statement: str):
        """
        Execute a raw SQL statement.

        Args:
            statement: The SQL to execute.

        Raises:
            PersistenceError: If the statement fails.
        """
        LOG.debug(f"Executing raw statement: {statement}")
        with self._connection("execute a raw statement") as conn:
            conn.execute(text(statement))

    def count(self) -> int:
        """
        Count the rows in the backing table.

        Returns:
            The number of rows.
        """
        with self._connection("count entities") as conn:
            return conn.execute(select(func.count()).select_from(self.table)).scalar_one()
