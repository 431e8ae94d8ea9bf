##############################################################################
# Copyright (c) crudbench developers. See the top-level LICENSE file for
# dates and other details. No copyright assignment is required to contribute
# to crudbench.
##############################################################################

"""
CLI module for displaying configuration and environment information.

This module defines the `InfoCommand` class, which handles the `info` subcommand
of the crudbench CLI. The `info` command displays the configuration crudbench would
run with, where the benchmark database lives and the versions of the Python
packages the benchmark depends on.
"""

# pylint: disable=duplicate-code

import logging
from argparse import ArgumentParser, Namespace

from crudbench.cli.commands.command_entry_point import CommandEntryPoint


LOG = logging.getLogger("crudbench")


class InfoCommand(CommandEntryPoint):
    """
    Handles `info` CLI command for viewing the configuration and environment.

    Methods:
        add_parser: Adds the `info` command to the CLI parser.
        process_command: Processes the CLI input and dispatches the appropriate action.
    """

    def add_parser(self, subparsers: ArgumentParser):
        """
        Add the `info` command parser to the CLI argument parser.

        Parameters:
            subparsers (ArgumentParser): The subparsers object to which the `info` command parser will be added.
        """
        info: ArgumentParser = subparsers.add_parser(
            "info",
            help="display info about the crudbench configuration and the python configuration. Useful for debugging.",
        )
        info.set_defaults(func=self.process_command)

    def process_command(self, args: Namespace):
        """
        CLI command to print crudbench configuration info.

        Args:
            args: Parsed CLI arguments.
        """
        from crudbench import display  # pylint: disable=import-outside-toplevel

        display.print_info(args)
