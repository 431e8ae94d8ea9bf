##############################################################################
# Copyright (c) crudbench developers. See the top-level LICENSE file for
# dates and other details. No copyright assignment is required to contribute
# to crudbench.
##############################################################################

"""
crudbench CLI Commands Package.

This package defines the implementations of the crudbench command-line interface.
Each module encapsulates the logic and argument parsing for a distinct command,
following a consistent structure built around the `CommandEntryPoint` interface.

Modules:
    command_entry_point: Defines the abstract base class `CommandEntryPoint` for all CLI commands.
    config: Implements the `config` command for writing the default configuration file.
    info: Implements the `info` command for displaying configuration and environment diagnostics.
    run: Implements the `run` command to run the benchmark suite.
    semantics: Implements the `semantics` command to check key write-back and instance identity.
"""

from crudbench.cli.commands.config import ConfigCommand
from crudbench.cli.commands.info import InfoCommand
from crudbench.cli.commands.run import RunCommand
from crudbench.cli.commands.semantics import SemanticsCommand


# Keep these in alphabetical order
ALL_COMMANDS = [
    ConfigCommand(),
    InfoCommand(),
    RunCommand(),
    SemanticsCommand(),
]
