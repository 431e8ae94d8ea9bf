##############################################################################
# Copyright (c) crudbench developers. See the top-level LICENSE file for
# dates and other details. No copyright assignment is required to contribute
# to crudbench.
##############################################################################

"""
Module of all crudbench-specific exception types.
"""

# Pylint complains that these exceptions are no different from Exception
# but we don't care, we just need new names for exceptions here
# pylint: disable=W0235

__all__ = (
    "CrudBenchError",
    "BenchmarkSetupError",
    "PersistenceError",
    "EntityNotFoundError",
    "SemanticsCheckError",
)


class CrudBenchError(Exception):
    """
    Base class for every error raised by crudbench.
    """

    def __init__(self, message):
        super().__init__(message)


class BenchmarkSetupError(CrudBenchError):
    """
    Exception for fatal errors while opening or creating the database
    used by a benchmark. Should cause the whole run to terminate.
    """

    def __init__(self, message):
        super().__init__(message)


class PersistenceError(CrudBenchError):
    """
    Exception to signal that a data-access operation (insert, update,
    query, raw statement) failed.
    """

    def __init__(self, message):
        super().__init__(message)


class EntityNotFoundError(PersistenceError):
    """
    Exception to signal that a row with the requested identifier
    does not exist.
    """

    def __init__(self, message):
        super().__init__(message)


class SemanticsCheckError(CrudBenchError):
    """
    Exception to signal that the persistence layer did not behave the way
    the semantics probe expects.
    """

    def __init__(self, message):
        super().__init__(message)
