##############################################################################
# Copyright (c) crudbench developers. See the top-level LICENSE file for
# dates and other details. No copyright assignment is required to contribute
# to crudbench.
##############################################################################

"""
CLI module for running the CRUD benchmark.

This module defines the `RunCommand` class, which handles the `run` subcommand of
the crudbench CLI. The command runs a warmup pass followed by the configured number
of measured repetitions against a fresh SQLite database, then prints the timings
as a table and optionally writes them to a JSON file.
"""

# pylint: disable=duplicate-code

import logging
from argparse import ArgumentDefaultsHelpFormatter, ArgumentParser, Namespace

from crudbench.cli.commands.command_entry_point import CommandEntryPoint
from crudbench.cli.utils import add_database_arguments, get_config_from_args
from crudbench.router import run_benchmark


LOG = logging.getLogger("crudbench")


class RunCommand(CommandEntryPoint):
    """
    Handles `run` CLI command for running the benchmark suite.

    Methods:
        add_parser: Adds the `run` command to the CLI parser.
        process_command: Processes the CLI input and dispatches the appropriate action.
    """

    def add_parser(self, subparsers: ArgumentParser):
        """
        Add the `run` command parser to the CLI argument parser.

        Parameters:
            subparsers (ArgumentParser): The subparsers object to which the `run` command parser will be added.
        """
        run: ArgumentParser = subparsers.add_parser(
            "run",
            help="Run the CRUD benchmark suite against a fresh SQLite database.",
            formatter_class=ArgumentDefaultsHelpFormatter,
        )
        run.set_defaults(func=self.process_command)
        run.add_argument(
            "--runs",
            type=int,
            default=None,
            help="Number of measured repetitions. Overrides `benchmark.runs` from app.yaml",
        )
        run.add_argument(
            "--batch-size",
            dest="batch_size",
            type=int,
            default=None,
            help="Entities per measured repetition. Overrides `benchmark.batch_size` from app.yaml",
        )
        run.add_argument(
            "--warmup-size",
            dest="warmup_size",
            type=int,
            default=None,
            help="Entities in the warmup pass. Overrides `benchmark.warmup_size` from app.yaml",
        )
        add_database_arguments(run)
        run.add_argument(
            "-o",
            "--output",
            type=str,
            default=None,
            help="Write the report as JSON to this file.",
        )
        run.add_argument(
            "--no-table",
            dest="no_table",
            action="store_true",
            default=False,
            help="Don't print the timing table once the suite finishes.",
        )
        run.add_argument(
            "--hide-warmup",
            dest="hide_warmup",
            action="store_true",
            default=False,
            help="Leave the warmup pass out of the timing table. The JSON report always keeps it.",
        )

    def process_command(self, args: Namespace):
        """
        CLI command to run the benchmark suite.

        Args:
            args: Parsed CLI arguments.
        """
        # if this is moved to the toplevel the config is loaded before the CLI can pick the config directory
        from crudbench import display  # pylint: disable=import-outside-toplevel

        config = get_config_from_args(args)
        report = run_benchmark(config)

        if not args.no_table:
            display.display_report(report, include_warmup=not args.hide_warmup)

        if args.output:
            report.dump_to_json_file(args.output)
            LOG.info(f"Report written to {args.output}")
