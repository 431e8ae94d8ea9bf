##############################################################################
# Copyright (c) crudbench developers. See the top-level LICENSE file for
# dates and other details. No copyright assignment is required to contribute
# to crudbench.
##############################################################################

"""
The benchmark runner.

`BenchmarkRunner` pushes a synthetic dataset through a store in a fixed sequence of
timed phases: one-by-one inserts and updates, batched inserts and updates, a load-all
query and full property access. Every phase is logged and recorded in a
[`BenchmarkReport`][benchmark.models.BenchmarkReport] as a raw wall-clock duration;
no statistics are computed here.

The runner also hosts the semantics check, which documents how the persistence
layer treats generated keys and loaded instances.
"""

import gc
import logging
import sqlite3
import time
from typing import List, Optional

import sqlalchemy

from crudbench.backends.store_base import StoreBase
from crudbench.benchmark.models import BenchmarkReport, BenchmarkSettings, PhaseTiming
from crudbench.db_scripts.data_models import MinimalEntity, SimpleEntityNotNull
from crudbench.db_scripts.entity_factory import create_entities
from crudbench.exceptions import SemanticsCheckError


LOG = logging.getLogger(__name__)

DEFAULT_ORM_NAME = "SQLAlchemy"
DELETE_ALL_STATEMENT = f"DELETE FROM {SimpleEntityNotNull.__tablename__}"


class BenchmarkRunner:
    """
    Runs the CRUD benchmark phases against a `SimpleEntityNotNull` store.

    Attributes:
        store: The store the benchmark runs against.
        settings: The sizing of the suite.
        orm_name: The name of the ORM, used as the prefix of every timing line.
        report: The report every timing is recorded in.

    Methods:
        run_full_suite: Run the warmup pass and every measured repetition.
        run_tests: Run the full phase sequence once.
        run_one_by_one: Run the one-by-one insert and update phases.
        delete_all: Delete every persisted entity.
        run_semantics_check: Check how the persistence layer treats keys and instances.
    """

    def __init__(
        self,
        store: StoreBase[SimpleEntityNotNull],
        settings: BenchmarkSettings = None,
        report: BenchmarkReport = None,
        orm_name: str = DEFAULT_ORM_NAME,
    ):
        """
        Initialize the runner.

        Args:
            store: The store the benchmark runs against.
            settings: The sizing of the suite. Defaults are used when not given.
            report: The report to record timings in. A new one is created when not given.
            orm_name: The name of the ORM, used as the prefix of every timing line.
        """
        self.store = store
        self.settings = settings if settings is not None else BenchmarkSettings()
        self.orm_name = orm_name
        self.report = report
        if self.report is None:
            self.report = BenchmarkReport(
                orm_name=orm_name,
                orm_version=sqlalchemy.__version__,
                sqlite_version=sqlite3.sqlite_version,
                settings=self.settings,
            )
        self._run_index: Optional[int] = None
        self._warmup: bool = False

    def _record(self, operation: str, entity_count: Optional[int], start: float) -> PhaseTiming:
        """
        Record and log the duration of a phase that started at `start`.

        Args:
            operation: The name of the phase.
            entity_count: The number of entities the phase worked on, if known.
            start: The `time.perf_counter` value taken when the phase started.

        Returns:
            The recorded timing.
        """
        duration_ms = (time.perf_counter() - start) * 1000
        timing = PhaseTiming(
            operation=operation,
            entity_count=entity_count,
            duration_ms=round(duration_ms, 3),
            run_index=self._run_index,
            warmup=self._warmup,
        )
        self.report.add_timing(timing)

        count_str = "all" if entity_count is None else str(entity_count)
        LOG.info(f"{self.orm_name}: {operation} {count_str} entities in {duration_ms:.0f} ms")
        return timing

    def run_full_suite(self) -> BenchmarkReport:
        """
        Run one warmup pass followed by `settings.runs` measured repetitions. Every
        repetition starts from an empty table, and the table is emptied again at the end.

        Returns:
            The report holding every timing of the suite.
        """
        self._warmup = True
        try:
            self.run_tests(self.settings.warmup_size)
        finally:
            self._warmup = False

        for run_index in range(self.settings.runs):
            self._run_index = run_index
            try:
                self.delete_all()
                self.run_tests(self.settings.batch_size)
            finally:
                self._run_index = None

        self.delete_all()
        LOG.info("---------------End")
        return self.report

    def run_tests(self, entity_count: int):
        """
        Run the full phase sequence over `entity_count` freshly generated entities.

        Args:
            entity_count: The number of entities to generate.
        """
        LOG.info(f"---------------Start: {entity_count}")

        entities = create_entities(entity_count)
        gc.collect()

        self.run_one_by_one(entities, entity_count // self.settings.one_by_one_divisor)

        gc.collect()
        self.delete_all()

        def create_all():
            for entity in entities:
                self.store.create(entity)

        start = time.perf_counter()
        self.store.call_batch_tasks(create_all)
        self._record("Created (batch)", len(entities), start)

        def update_all():
            for entity in entities:
                self.store.update(entity)

        start = time.perf_counter()
        self.store.call_batch_tasks(update_all)
        self._record("Updated (batch)", len(entities), start)

        start = time.perf_counter()
        reloaded = self.store.retrieve_all()
        self._record("Loaded (batch)", len(reloaded), start)

        start = time.perf_counter()
        for entity in reloaded:
            _ = (
                entity.id,
                entity.simple_boolean,
                entity.simple_byte,
                entity.simple_short,
                entity.simple_int,
                entity.simple_long,
                entity.simple_float,
                entity.simple_double,
                entity.simple_string,
                entity.simple_byte_array,
            )
        self._record("Accessed properties of", len(reloaded), start)

        gc.collect()
        LOG.info(f"---------------End: {entity_count}")

    def run_one_by_one(self, entities: List[SimpleEntityNotNull], count: int):
        """
        Insert and then update the first `count` entities, each in its own transaction.

        Args:
            entities: The entities to work on.
            count: How many of `entities` to insert and update.
        """
        start = time.perf_counter()
        for entity in entities[:count]:
            self.store.create(entity)
        self._record("Inserted (one-by-one)", count, start)

        start = time.perf_counter()
        for entity in entities[:count]:
            self.store.update(entity)
        self._record("Updated (one-by-one)", count, start)

    def delete_all(self):
        """
        Delete every persisted `SimpleEntityNotNull` with a single raw statement.
        """
        start = time.perf_counter()
        self.store.execute_raw(DELETE_ALL_STATEMENT)
        self._record("Deleted", None, start)

    @staticmethod
    def run_semantics_check(minimal_store: StoreBase[MinimalEntity]):
        """
        Check how the persistence layer treats generated keys and loaded instances.

        One `MinimalEntity` is created. Its identifier must still be unset afterwards,
        since the store doesn't write generated keys back. Loading the row twice (once
        through a load-all query, once by identifier) must yield two new instances that
        are distinct from each other and from the created one, and that agree on a
        non-null identifier.

        Args:
            minimal_store: The store for `MinimalEntity` entities. Expected to be empty.

        Raises:
            SemanticsCheckError: If the persistence layer doesn't behave as described.
        """
        data = MinimalEntity()
        minimal_store.create(data)
        if data.id is not None:
            raise SemanticsCheckError(f"Expected the identifier to stay unset after insert, got '{data.id}'.")

        loaded = minimal_store.retrieve_all()
        if not loaded:
            raise SemanticsCheckError("The inserted MinimalEntity could not be loaded back.")
        data2 = loaded[0]
        if data2.id is None:
            raise SemanticsCheckError("The loaded MinimalEntity has no identifier.")
        data3 = minimal_store.retrieve(data2.id)

        if data2 is data or data3 is data:
            raise SemanticsCheckError("Loading returned the instance that was passed to create.")
        if data2 is data3:
            raise SemanticsCheckError("Two loads of the same row returned the same instance.")
        if data2.id != data3.id:
            raise SemanticsCheckError(f"The two loads disagree on the identifier: '{data2.id}' != '{data3.id}'.")

        LOG.info(
            "Semantics check passed: generated keys are not written back and every load "
            f"returns a new instance (id '{data2.id}')."
        )
