##############################################################################
# Copyright (c) crudbench developers. See the top-level LICENSE file for
# dates and other details. No copyright assignment is required to contribute
# to crudbench.
##############################################################################

"""
Manages formatting for displaying information to the console.
"""
import logging
import os
import sqlite3
from argparse import Namespace

from tabulate import tabulate

from crudbench.benchmark.models import BenchmarkReport
from crudbench.utils import get_package_versions


LOG = logging.getLogger("crudbench")

REPORT_HEADERS = ["Run", "Operation", "Entities", "Time (ms)"]


def format_report_table(report: BenchmarkReport, tablefmt: str = "simple", include_warmup: bool = True) -> str:
    """
    Format the timings of a report as a table, one row per phase, in the order
    the phases ran.

    Args:
        report: The report to format.
        tablefmt: The `tabulate` table format to use.
        include_warmup: If False, the phases of the warmup pass are left out.

    Returns:
        The formatted table.
    """
    rows = []
    timings = report.timings if include_warmup else report.measured_timings()
    for timing in timings:
        if timing.warmup:
            run = "warmup"
        elif timing.run_index is None:
            run = "-"
        else:
            run = timing.run_index + 1
        entities = "all" if timing.entity_count is None else timing.entity_count
        rows.append([run, timing.operation, entities, timing.duration_ms])
    return tabulate(rows, headers=REPORT_HEADERS, tablefmt=tablefmt, floatfmt=".1f")


def display_report(report: BenchmarkReport, include_warmup: bool = True):
    """
    Print a benchmark report to the console.

    Args:
        report: The report to print.
        include_warmup: If False, the phases of the warmup pass are left out of the table.
    """
    print(f"{report.orm_name} {report.orm_version} on SQLite {report.sqlite_version} (started {report.started})")
    print("")
    print(format_report_table(report, include_warmup=include_warmup))


def display_config_info():
    """
    Prints useful configuration information for crudbench to the console.
    """
    from crudbench.benchmark.session import get_database_path  # pylint: disable=C0415
    from crudbench.config.configfile import CONFIG, default_config_info  # pylint: disable=C0415

    print("crudbench Configuration")
    print("-" * 25)
    print("")

    conf = default_config_info()
    conf["database"] = get_database_path(CONFIG.database) or "in-memory"
    conf["sqlite library"] = sqlite3.sqlite_version
    print(tabulate(conf.items(), tablefmt="presto"))
    print("")
    print(CONFIG)


def print_info(args: Namespace):  # pylint: disable=W0613
    """
    Provide version and location information about python and packages to
    facilitate user troubleshooting. Also provides info about the configuration.

    Args:
        args: parsed CLI arguments (currently unused).
    """
    display_config_info()

    print("")
    print("Python Configuration")
    print("-" * 25)
    print("")
    package_list = ["pip", "crudbench", "SQLAlchemy", "PyYAML", "coloredlogs", "tabulate", "filelock"]
    package_versions = get_package_versions(package_list)
    print(package_versions)
    pythonpath = os.environ.get("PYTHONPATH")
    print(f"$PYTHONPATH: {pythonpath}")
