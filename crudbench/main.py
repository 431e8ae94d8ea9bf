##############################################################################
# Copyright (c) crudbench developers. See the top-level LICENSE file for
# dates and other details. No copyright assignment is required to contribute
# to crudbench.
##############################################################################

"""
Main entry point into crudbench's codebase.
"""

import logging
import sys
import traceback

from crudbench.cli.argparse_main import build_main_parser
from crudbench.log_formatter import setup_logging


LOG = logging.getLogger("crudbench")


def main():
    """
    Entry point for the crudbench command-line interface (CLI).

    This function sets up the argument parser, initializes logging and executes
    the function of the selected command. Help is printed when no arguments are
    given, and any exception raised by the command is logged and turned into a
    non-zero exit code.
    """
    parser = build_main_parser()
    if len(sys.argv) == 1:
        parser.print_help(sys.stdout)
        return 1
    args = parser.parse_args()

    setup_logging(logger=LOG, log_level=args.level.upper(), colors=True)

    try:
        args.func(args)
        # pylint complains that this exception is too broad - being at the literal top of the program stack, it's ok.
    except Exception as excpt:  # pylint: disable=broad-except
        LOG.debug(traceback.format_exc())
        LOG.error(str(excpt))
        sys.exit(1)

    sys.exit()


if __name__ == "__main__":
    main()
