##############################################################################
# Copyright (c) crudbench developers. See the top-level LICENSE file for
# dates and other details. No copyright assignment is required to contribute
# to crudbench.
##############################################################################

"""
crudbench: CRUD throughput benchmarks for an ORM over an embedded database.

This module contains the source code for crudbench.
"""

__version__ = "1.0.0"
VERSION = __version__
