##############################################################################
# Copyright (c) crudbench developers. See the top-level LICENSE file for
# dates and other details. No copyright assignment is required to contribute
# to crudbench.
##############################################################################

"""
The `backends` package contains the persistence layer the benchmark runs against.

Subpackages:
    - `sqlite/`: SQLAlchemy stores backed by an embedded SQLite database.

Modules:
    - `store_base.py`: Defines the abstract `StoreBase` contract every store implements.
"""
