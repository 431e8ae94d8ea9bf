##############################################################################
# Copyright (c) crudbench developers. See the top-level LICENSE file for
# dates and other details. No copyright assignment is required to contribute
# to crudbench.
##############################################################################

"""
This module routes actions from the crudbench CLI to the benchmark logic.

It keeps the command handlers decoupled from how a benchmark database is set
up and torn down.
"""
import logging

import sqlalchemy

from crudbench.benchmark.models import BenchmarkReport, BenchmarkSettings
from crudbench.benchmark.runner import DEFAULT_ORM_NAME, BenchmarkRunner
from crudbench.benchmark.session import benchmark_session
from crudbench.config import Config


LOG = logging.getLogger(__name__)


def run_benchmark(config: Config) -> BenchmarkReport:
    """
    Run the full benchmark suite against a fresh database.

    The database described by the `database` section of `config` is created before
    the suite starts and removed once it finishes, even if a phase fails.

    Args:
        config: The configuration to run with. Its `benchmark` section sizes the
            suite and its `database` section describes where the database lives.

    Returns:
        The report holding every timing of the suite.
    """
    settings = BenchmarkSettings.from_namespace(config.benchmark)
    LOG.info(
        f"Running {settings.runs} runs of {settings.batch_size} entities "
        f"(warmup: {settings.warmup_size} entities)"
    )

    with benchmark_session(config.database) as session:
        report = BenchmarkReport(
            orm_name=DEFAULT_ORM_NAME,
            orm_version=sqlalchemy.__version__,
            sqlite_version=session.connection_source.get_version(),
            settings=settings,
        )
        runner = BenchmarkRunner(session.entity_store, settings=settings, report=report)
        return runner.run_full_suite()


def check_semantics(config: Config):
    """
    Run the key and instance semantics check against a fresh database.

    Args:
        config: The configuration to run with. Only its `database` section is used.

    Raises:
        SemanticsCheckError: If the persistence layer doesn't behave as expected.
    """
    with benchmark_session(config.database) as session:
        BenchmarkRunner.run_semantics_check(session.minimal_store)
