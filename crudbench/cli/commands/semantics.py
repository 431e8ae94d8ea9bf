##############################################################################
# Copyright (c) crudbench developers. See the top-level LICENSE file for
# dates and other details. No copyright assignment is required to contribute
# to crudbench.
##############################################################################

"""
CLI module for checking how the persistence layer treats keys and instances.

This module defines the `SemanticsCommand` class, which handles the `semantics`
subcommand of the crudbench CLI. The command inserts a single entity into a fresh
database and verifies that its generated key is not written back and that every
load returns a new, distinct instance.
"""

# pylint: disable=duplicate-code

import logging
from argparse import ArgumentParser, Namespace

from crudbench.cli.commands.command_entry_point import CommandEntryPoint
from crudbench.cli.utils import add_database_arguments, get_config_from_args
from crudbench.router import check_semantics


LOG = logging.getLogger("crudbench")


class SemanticsCommand(CommandEntryPoint):
    """
    Handles `semantics` CLI command for checking key write-back and instance identity.

    Methods:
        add_parser: Adds the `semantics` command to the CLI parser.
        process_command: Processes the CLI input and dispatches the appropriate action.
    """

    def add_parser(self, subparsers: ArgumentParser):
        """
        Add the `semantics` command parser to the CLI argument parser.

        Parameters:
            subparsers (ArgumentParser): The subparsers object to which the `semantics` command parser will be added.
        """
        semantics: ArgumentParser = subparsers.add_parser(
            "semantics",
            help="Check that generated keys aren't written back and that every load returns a new instance.",
        )
        semantics.set_defaults(func=self.process_command)
        add_database_arguments(semantics)

    def process_command(self, args: Namespace):
        """
        CLI command to run the semantics check.

        Args:
            args: Parsed CLI arguments.
        """
        check_semantics(get_config_from_args(args))
