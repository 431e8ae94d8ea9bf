##############################################################################
# Copyright (c) crudbench developers. See the top-level LICENSE file for
# dates and other details. No copyright assignment is required to contribute
# to crudbench.
##############################################################################

"""
Utility functions to support crudbench CLI command handlers.

These helpers turn the command-line arguments of a command into the
configuration it runs with.
"""

import logging
from argparse import ArgumentParser, Namespace

from crudbench.config import Config, configfile
from crudbench.config.configfile import initialize_config, override_config


LOG = logging.getLogger("crudbench")


def add_database_arguments(parser: ArgumentParser):
    """
    Add the arguments shared by every command that opens the benchmark database.

    Args:
        parser: The parser of the command.
    """
    parser.add_argument(
        "--config-dir",
        dest="config_dir",
        type=str,
        default=None,
        help="Directory holding the app.yaml to use. Default: the current directory, then ~/.crudbench",
    )
    parser.add_argument(
        "--in-memory",
        dest="in_memory",
        action="store_true",
        default=None,
        help="Run against an in-memory database instead of a database file.",
    )


def get_config_from_args(args: Namespace) -> Config:
    """
    Build the configuration a command runs with. The configuration file is loaded
    from `args.config_dir` when given, and any settings passed on the command line
    replace the ones from the file.

    Args:
        args: Parsed CLI arguments.

    Returns:
        A `Config` object holding the settings for this command.
    """
    config_dir = getattr(args, "config_dir", None)
    config = initialize_config(config_dir) if config_dir else configfile.CONFIG

    config = override_config(config, "database", in_memory=getattr(args, "in_memory", None))
    config = override_config(
        config,
        "benchmark",
        runs=getattr(args, "runs", None),
        batch_size=getattr(args, "batch_size", None),
        warmup_size=getattr(args, "warmup_size", None),
    )
    LOG.debug(f"Running with {config}")
    return config
