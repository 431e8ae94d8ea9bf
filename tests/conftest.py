##############################################################################
# Copyright (c) crudbench developers. See the top-level LICENSE file for
# dates and other details. No copyright assignment is required to contribute
# to crudbench.
##############################################################################

"""
This module loads the pytest fixtures used throughout the entire test suite and
gates the performance tests.
"""
import os
from glob import glob

import pytest
from _pytest.config import Config as PytestConfig


#######################################
# Loading in Module Specific Fixtures #
#######################################

fixture_glob = os.path.join("tests", "fixtures", "**", "*.py")
pytest_plugins = [
    fixture_file.replace(os.sep, ".").replace(".py", "")
    for fixture_file in glob(fixture_glob, recursive=True)
    if not fixture_file.endswith("__init__.py")
]


#######################################
###### Performance Test Handling ######
#######################################

PERFORMANCE_ENV_VAR = "CRUDBENCH_RUN_PERFORMANCE_TESTS"


def pytest_collection_modifyitems(config: PytestConfig, items: list):  # pylint: disable=unused-argument
    """
    Skip every test marked `performance` unless `CRUDBENCH_RUN_PERFORMANCE_TESTS=1`
    is set in the environment.

    Args:
        config: The pytest configuration object.
        items: The collected test items.
    """
    if os.environ.get(PERFORMANCE_ENV_VAR) == "1":
        return

    skip_performance = pytest.mark.skip(reason=f"set {PERFORMANCE_ENV_VAR}=1 to run performance tests")
    for item in items:
        if "performance" in item.keywords:
            item.add_marker(skip_performance)

