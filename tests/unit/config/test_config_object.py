##############################################################################
# Copyright (c) crudbench developers. See the top-level LICENSE file for
# dates and other details. No copyright assignment is required to contribute
# to crudbench.
##############################################################################

"""
Test the functionality of the Config object.
"""

from copy import copy
from types import SimpleNamespace

from crudbench.config import Config


class TestConfig:
    """
    Class for testing the Config object. We'll store a valid `app_dict`
    as an attribute here so that each test doesn't have to redefine it
    each time.
    """

    app_dict = {
        "benchmark": {"runs": 4, "batch_size": 1000, "warmup_size": 50, "one_by_one_divisor": 10},
        "database": {
            "name": "test-db",
            "directory": "/path/to/db",
            "in_memory": False,
            "journal_mode": "WAL",
            "echo": False,
        },
    }

    def test_config_creation(self):
        """
        Test the creation of the Config object. Each section becomes a namespace.
        """
        config = Config(self.app_dict)

        assert config.benchmark == SimpleNamespace(**self.app_dict["benchmark"])
        assert config.database == SimpleNamespace(**self.app_dict["database"])

    def test_config_missing_section(self):
        """
        Test that a missing section is left as None.
        """
        config = Config({"benchmark": {"runs": 1}})
        assert config.benchmark.runs == 1
        assert config.database is None

    def test_config_copy(self):
        """
        Test the `__copy__` magic method of the Config object. Changes to the copy's
        sections shouldn't reach the original.
        """
        config = Config(self.app_dict)
        copied_config = copy(config)

        assert copied_config is not config
        assert copied_config.benchmark == config.benchmark
        assert copied_config.benchmark is not config.benchmark

        copied_config.benchmark.runs = 99
        assert config.benchmark.runs == 4

    def test_config_str(self):
        """
        Test the `__str__` magic method of the Config object.
        """
        config = Config(self.app_dict)
        expected_lines = [
            "config:",
            "  benchmark:",
            "    runs: 4",
            "    batch_size: 1000",
            "    warmup_size: 50",
            "    one_by_one_divisor: 10",
            "  database:",
            "    name: 'test-db'",
            "    directory: '/path/to/db'",
            "    in_memory: False",
            "    journal_mode: 'WAL'",
            "    echo: False",
        ]
        assert str(config) == "\n".join(expected_lines)

    def test_config_str_missing_section(self):
        """
        Test that a missing section is shown as None.
        """
        config = Config({})
        assert str(config) == "config:\n  benchmark:\n    None\n  database:\n    None"
