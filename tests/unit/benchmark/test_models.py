##############################################################################
# Copyright (c) crudbench developers. See the top-level LICENSE file for
# dates and other details. No copyright assignment is required to contribute
# to crudbench.
##############################################################################

"""
Tests for the `models.py` module of the `benchmark` package.
"""

import json
import os
from types import SimpleNamespace

import pytest

from crudbench.benchmark.models import BenchmarkReport, BenchmarkSettings, PhaseTiming


@pytest.fixture
def sample_report() -> BenchmarkReport:
    """
    A report holding a warmup timing and two measured timings.

    Returns:
        The report.
    """
    report = BenchmarkReport(
        orm_name="SQLAlchemy",
        orm_version="2.0.0",
        sqlite_version="3.45.0",
        settings=BenchmarkSettings(runs=1, batch_size=100, warmup_size=10),
    )
    report.add_timing(PhaseTiming("Created (batch)", 10, 1.5, warmup=True))
    report.add_timing(PhaseTiming("Created (batch)", 100, 12.25, run_index=0))
    report.add_timing(PhaseTiming("Deleted", None, 0.5))
    return report


class TestBenchmarkSettings:
    """Tests for the BenchmarkSettings dataclass."""

    def test_defaults(self):
        """
        Test the default sizing of a suite.
        """
        settings = BenchmarkSettings()
        assert settings.runs == 8
        assert settings.batch_size == 10000
        assert settings.warmup_size == 100
        assert settings.one_by_one_divisor == 10

    @pytest.mark.parametrize(
        "kwargs",
        [
            {"runs": -1},
            {"batch_size": -5},
            {"warmup_size": "100"},
            {"runs": True},
            {"batch_size": 1.5},
            {"one_by_one_divisor": 0},
        ],
    )
    def test_invalid_settings_raise(self, kwargs: dict):
        """
        Test that out of range settings raise a ValueError.

        Args:
            kwargs: The invalid settings.
        """
        with pytest.raises(ValueError, match="must be a"):
            BenchmarkSettings(**kwargs)

    def test_zero_sizes_are_allowed(self):
        """
        Test that a suite with no runs and empty batches is valid.
        """
        settings = BenchmarkSettings(runs=0, batch_size=0, warmup_size=0)
        assert settings.runs == 0

    def test_from_namespace(self):
        """
        Test building the settings from a configuration section, with missing keys defaulted.
        """
        namespace = SimpleNamespace(runs=3, batch_size=500)
        settings = BenchmarkSettings.from_namespace(namespace)
        assert settings == BenchmarkSettings(runs=3, batch_size=500, warmup_size=100, one_by_one_divisor=10)


class TestBenchmarkReport:
    """Tests for the BenchmarkReport dataclass."""

    def test_measured_timings(self, sample_report: BenchmarkReport):
        """
        Test that warmup timings are left out of the measured timings.

        Args:
            sample_report: A report holding a warmup timing and two measured timings.
        """
        measured = sample_report.measured_timings()
        assert len(sample_report.timings) == 3
        assert [timing.operation for timing in measured] == ["Created (batch)", "Deleted"]
        assert not any(timing.warmup for timing in measured)

    def test_to_dict(self, sample_report: BenchmarkReport):
        """
        Test that the report converts to plain dictionaries.

        Args:
            sample_report: A report holding a warmup timing and two measured timings.
        """
        data = sample_report.to_dict()
        assert data["orm_name"] == "SQLAlchemy"
        assert data["settings"]["batch_size"] == 100
        assert data["timings"][2] == {
            "operation": "Deleted",
            "entity_count": None,
            "duration_ms": 0.5,
            "run_index": None,
            "warmup": False,
        }

    def test_from_dict(self, sample_report: BenchmarkReport):
        """
        Test that a report rebuilt from its dictionary equals the original.

        Args:
            sample_report: A report holding a warmup timing and two measured timings.
        """
        rebuilt = BenchmarkReport.from_dict(sample_report.to_dict())
        assert rebuilt == sample_report
        assert isinstance(rebuilt.settings, BenchmarkSettings)
        assert all(isinstance(timing, PhaseTiming) for timing in rebuilt.timings)

    def test_dump_and_load_json_file(self, sample_report: BenchmarkReport, tmp_path):
        """
        Test writing a report to a JSON file and reading it back.

        Args:
            sample_report: A report holding a warmup timing and two measured timings.
            tmp_path: A built in pytest fixture providing a temporary directory.
        """
        filepath = str(tmp_path / "reports" / "report.json")

        sample_report.dump_to_json_file(filepath)

        assert os.path.exists(filepath)
        assert not os.path.exists(f"{filepath}.tmp")
        with open(filepath, "r") as json_file:
            assert json.load(json_file)["sqlite_version"] == "3.45.0"
        assert BenchmarkReport.load_from_json_file(filepath) == sample_report

    def test_dump_without_path_raises(self, sample_report: BenchmarkReport):
        """
        Test that dumping without a file path raises a ValueError.

        Args:
            sample_report: A report holding a warmup timing and two measured timings.
        """
        with pytest.raises(ValueError, match="A valid file path must be provided."):
            sample_report.dump_to_json_file("")

    def test_load_missing_file_raises(self, tmp_path):
        """
        Test that loading a file that doesn't exist raises a ValueError.

        Args:
            tmp_path: A built in pytest fixture providing a temporary directory.
        """
        with pytest.raises(ValueError, match="A valid file path must be provided."):
            BenchmarkReport.load_from_json_file(str(tmp_path / "missing.json"))
