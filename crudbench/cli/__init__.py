##############################################################################
# Copyright (c) crudbench developers. See the top-level LICENSE file for
# dates and other details. No copyright assignment is required to contribute
# to crudbench.
##############################################################################

"""
crudbench CLI Package.

This package defines the core components and supporting utilities for the
crudbench command-line interface (CLI). It provides the entry point parser for
the `crudbench` CLI tool, its subcommands, and shared helper functions used
across CLI handlers.

Subpackages:
    commands: Contains all command implementations for the crudbench CLI.

Modules:
    argparse_main: Sets up the top-level argument parser and integrates all
        registered CLI subcommands into the `crudbench` CLI interface.
    utils: Provides shared utility functions for building the configuration a
        command runs with.
"""
