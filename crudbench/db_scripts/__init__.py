##############################################################################
# Copyright (c) crudbench developers. See the top-level LICENSE file for
# dates and other details. No copyright assignment is required to contribute
# to crudbench.
##############################################################################

"""
The `db_scripts` package defines the entities that crudbench stores in its
embedded database and the factory that builds synthetic instances of them.

Modules:
    data_models.py: ORM-mapped dataclasses for every table crudbench uses.
    entity_factory.py: Deterministic construction of synthetic entities from integer seeds.
"""
