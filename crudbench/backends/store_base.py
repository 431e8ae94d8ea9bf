##############################################################################
# Copyright (c) crudbench developers. See the top-level LICENSE file for
# dates and other details. No copyright assignment is required to contribute
# to crudbench.
##############################################################################

"""
This module defines the abstract base class for all data store implementations in crudbench.

This module provides the `StoreBase` class, which outlines the narrow contract the
benchmark runner consumes: create, update, query-by-id, query-all, grouped
transactions and raw statements. All concrete store classes must inherit from
this class and implement its abstract methods.
"""

from abc import ABC, abstractmethod
from typing import Any, Callable, Generic, List, TypeVar

from crudbench.db_scripts.data_models import BaseDataModel


T = TypeVar("T", bound=BaseDataModel)


class StoreBase(ABC, Generic[T]):
    """
    Base class for all stores supported in crudbench.

    Methods:
        create: Insert an entity into the database.
        update: Update the row of an existing entity.
        retrieve: Retrieve an entity from the database by ID.
        retrieve_all: Query the database for all entities of this type.
        call_batch_tasks: Run a unit of work inside one transaction.
        execute_raw: Execute a raw SQL statement.
    """

    @abstractmethod
    def create(self, entity: T):
        """
        Insert an entity into the database.

        Args:
            entity: The entity to insert.
        """
        raise NotImplementedError("Subclasses of `StoreBase` must implement a `create` method.")

    @abstractmethod
    def update(self, entity: T):
        """
        Update the row that has the identifier of `entity`.

        Args:
            entity: The entity to write.
        """
        raise NotImplementedError("Subclasses of `StoreBase` must implement an `update` method.")

    @abstractmethod
    def retrieve(self, identifier: int) -> T:
        """
        Retrieve an entity from the database by its identifier.

        Args:
            identifier: The identifier of the entity to retrieve.

        Returns:
            A newly constructed entity.
        """
        raise NotImplementedError("Subclasses of `StoreBase` must implement a `retrieve` method.")

    @abstractmethod
    def retrieve_all(self) -> List[T]:
        """
        Query the database for all entities of this type.

        Returns:
            A list of newly constructed entities.
        """
        raise NotImplementedError("Subclasses of `StoreBase` must implement a `retrieve_all` method.")

    @abstractmethod
    def call_batch_tasks(self, unit_of_work: Callable[[], Any]) -> Any:
        """
        Run `unit_of_work` inside a single transaction.

        Args:
            unit_of_work: A callable taking no arguments that issues store operations.

        Returns:
            Whatever `unit_of_work` returns.
        """
        raise NotImplementedError("Subclasses of `StoreBase` must implement a `call_batch_tasks` method.")

    @abstractmethod
    def execute_raw(self, statement: str):
        """
        Execute a raw SQL statement.

        Args:
            statement: The SQL to execute.
        """
        raise NotImplementedError("Subclasses of `StoreBase` must implement an `execute_raw` method.")
