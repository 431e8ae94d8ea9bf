##############################################################################
# Copyright (c) crudbench developers. See the top-level LICENSE file for
# dates and other details. No copyright assignment is required to contribute
# to crudbench.
##############################################################################

"""
The `benchmark` package runs the timed CRUD phases and collects their timings.

Modules:
    models.py: Settings, per-phase timings and the report of a suite.
    runner.py: The `BenchmarkRunner` and its semantics check.
    session.py: Scoped acquisition of the database a benchmark runs against.
"""

from crudbench.benchmark.models import BenchmarkReport, BenchmarkSettings, PhaseTiming
from crudbench.benchmark.runner import BenchmarkRunner
from crudbench.benchmark.session import BenchmarkSession, benchmark_session


__all__ = [
    "BenchmarkReport",
    "BenchmarkRunner",
    "BenchmarkSession",
    "BenchmarkSettings",
    "PhaseTiming",
    "benchmark_session",
]
