##############################################################################
# Copyright (c) crudbench developers. See the top-level LICENSE file for
# dates and other details. No copyright assignment is required to contribute
# to crudbench.
##############################################################################

"""
CLI command for managing crudbench configuration files.

This module defines the `ConfigCommand` class, which provides the CLI interface
to write the default `app.yaml` configuration file that sizes the benchmark and
describes where its database lives.
"""

# pylint: disable=duplicate-code

import logging
from argparse import ArgumentDefaultsHelpFormatter, ArgumentParser, Namespace

from crudbench.cli.commands.command_entry_point import CommandEntryPoint
from crudbench.config.config_filepaths import CRUDBENCH_HOME
from crudbench.config.configfile import write_default_config


LOG = logging.getLogger("crudbench")


class ConfigCommand(CommandEntryPoint):
    """
    CLI command group for managing crudbench configuration files.

    Methods:
        add_parser: Adds the `config` command and its subcommands to the CLI parser.
        process_command: Processes the CLI input and dispatches the appropriate action.
    """

    def _add_create_subcommand(self, config_subparsers: ArgumentParser):
        """
        Add the `create` subcommand to write the default configuration file.

        Parameters:
            config_subparsers (ArgumentParser): The subparsers object to add the subcommand to.
        """
        config_create_parser = config_subparsers.add_parser(
            "create",
            help="Write the default app.yaml.",
            formatter_class=ArgumentDefaultsHelpFormatter,
        )
        config_create_parser.add_argument(
            "-o",
            "--output-dir",
            dest="output_dir",
            type=str,
            default=CRUDBENCH_HOME,
            help="The directory to write app.yaml to.",
        )
        config_create_parser.add_argument(
            "--force",
            action="store_true",
            default=False,
            help="Overwrite an existing app.yaml.",
        )

    def add_parser(self, subparsers: ArgumentParser):
        """
        Add the `config` command parser to the CLI argument parser.

        Parameters:
            subparsers (ArgumentParser): The subparsers object to which the `config` command parser will be added.
        """
        config: ArgumentParser = subparsers.add_parser(
            "config",
            help="Manage the crudbench configuration file.",
        )
        config.set_defaults(func=self.process_command)
        config_subparsers = config.add_subparsers(dest="commands", help="Subcommands for 'config'", required=True)

        self._add_create_subcommand(config_subparsers)

    def process_command(self, args: Namespace):
        """
        CLI command to manage crudbench configuration files.

        Args:
            args (Namespace): Parsed command-line arguments.
        """
        if args.commands == "create":
            write_default_config(args.output_dir, force=args.force)
