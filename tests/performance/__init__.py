##############################################################################
# Copyright (c) crudbench developers. See the top-level LICENSE file for
# dates and other details. No copyright assignment is required to contribute
# to crudbench.
##############################################################################

"""
Performance tests for crudbench.

These run the benchmark suite at its full default size. They are separate from
the unit tests, take longer to run, and are skipped unless
`CRUDBENCH_RUN_PERFORMANCE_TESTS=1` is set.
"""
