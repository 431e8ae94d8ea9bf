##############################################################################
# Copyright (c) crudbench developers. See the top-level LICENSE file for
# dates and other details. No copyright assignment is required to contribute
# to crudbench.
##############################################################################

"""
This module houses the dataclasses that describe a benchmark: the settings that
size it, the timing of a single phase, and the report that collects every timing
of a suite.
"""

import json
import logging
import os
from dataclasses import asdict, dataclass, field
from datetime import datetime
from types import SimpleNamespace
from typing import Any, Dict, List, Optional, Type, TypeVar

from filelock import FileLock

from crudbench.utils import get_yaml_var


LOG = logging.getLogger(__name__)
R = TypeVar("R", bound="BenchmarkReport")


@dataclass
class BenchmarkSettings:
    """
    The sizing of a benchmark suite.

    Attributes:
        runs: The number of measured repetitions after the warmup pass.
        batch_size: The number of entities each measured repetition works on.
        warmup_size: The number of entities the warmup pass works on.
        one_by_one_divisor: The one-by-one phases work on `entity_count // one_by_one_divisor` entities.
    """

    runs: int = 8
    batch_size: int = 10000
    warmup_size: int = 100
    one_by_one_divisor: int = 10

    def __post_init__(self):
        """
        Validate the settings.

        Raises:
            ValueError: If a setting is out of range.
        """
        for name in ("runs", "batch_size", "warmup_size"):
            value = getattr(self, name)
            if not isinstance(value, int) or isinstance(value, bool) or value < 0:
                raise ValueError(f"The benchmark setting '{name}' must be a non-negative integer, got {value!r}.")
        divisor = self.one_by_one_divisor
        if not isinstance(divisor, int) or isinstance(divisor, bool) or divisor < 1:
            raise ValueError(f"The benchmark setting 'one_by_one_divisor' must be a positive integer, got {divisor!r}.")

    @classmethod
    def from_namespace(cls, namespace: SimpleNamespace) -> "BenchmarkSettings":
        """
        Build the settings from the `benchmark` section of the configuration.
        Settings missing from the section keep their default value.

        Args:
            namespace: The `benchmark` section of a [`Config`][config.Config] object.

        Returns:
            A `BenchmarkSettings` instance.
        """
        defaults = cls()
        return cls(
            runs=get_yaml_var(namespace, "runs", defaults.runs),
            batch_size=get_yaml_var(namespace, "batch_size", defaults.batch_size),
            warmup_size=get_yaml_var(namespace, "warmup_size", defaults.warmup_size),
            one_by_one_divisor=get_yaml_var(namespace, "one_by_one_divisor", defaults.one_by_one_divisor),
        )


@dataclass
class PhaseTiming:
    """
    The wall-clock duration of one benchmark phase.

    Attributes:
        operation: The name of the phase (e.g. "Inserted (one-by-one)").
        entity_count: The number of entities the phase worked on. None for bulk deletes.
        duration_ms: The elapsed time of the phase in milliseconds.
        run_index: The repetition the phase belongs to. None outside a repetition.
        warmup: True if the phase was part of the warmup pass.
    """

    operation: str
    entity_count: Optional[int]
    duration_ms: float
    run_index: Optional[int] = None
    warmup: bool = False


@dataclass
class BenchmarkReport:
    """
    Every timing recorded by a benchmark suite, along with the environment it ran in.

    Attributes:
        orm_name: The name of the ORM that was measured.
        orm_version: The version of the ORM that was measured.
        sqlite_version: The version of the SQLite library used.
        settings: The settings the suite ran with.
        started: When the suite started, in ISO 8601 format.
        timings: The raw per-phase timings, in the order they were recorded.

    Methods:
        add_timing: Append a timing to the report.
        measured_timings: Get the timings that weren't part of the warmup pass.
        to_dict: Convert the report to a dictionary.
        from_dict (classmethod): Create a report from a dictionary.
        dump_to_json_file: Dump the report to a JSON file.
        load_from_json_file (classmethod): Load a report from a JSON file.
    """

    orm_name: str
    orm_version: str
    sqlite_version: str
    settings: BenchmarkSettings = field(default_factory=BenchmarkSettings)
    started: str = field(default_factory=lambda: datetime.now().isoformat())
    timings: List[PhaseTiming] = field(default_factory=list)

    def add_timing(self, timing: PhaseTiming):
        """
        Append a timing to the report.

        Args:
            timing: The timing to append.
        """
        self.timings.append(timing)

    def measured_timings(self) -> List[PhaseTiming]:
        """
        Get the timings that weren't part of the warmup pass.

        Returns:
            A list of timings.
        """
        return [timing for timing in self.timings if not timing.warmup]

    def to_dict(self) -> Dict[str, Any]:
        """
        Convert the report to a dictionary.

        Returns:
            The report as a dictionary.
        """
        return asdict(self)

    @classmethod
    def from_dict(cls: Type[R], data: Dict[str, Any]) -> R:
        """
        Create a report from a dictionary.

        Args:
            data: A dictionary as produced by `to_dict`.

        Returns:
            A `BenchmarkReport` instance.
        """
        data = dict(data)
        data["settings"] = BenchmarkSettings(**data.get("settings", {}))
        data["timings"] = [PhaseTiming(**timing) for timing in data.get("timings", [])]
        return cls(**data)

    def dump_to_json_file(self, filepath: str):
        """
        Dump the data of this report to a JSON file.

        Args:
            filepath: The path to the JSON file where the data will be written.

        Raises:
            ValueError: If the `filepath` is not provided or is invalid.
        """
        if not filepath:
            raise ValueError("A valid file path must be provided.")

        # Ensure the directory for the file exists
        dirname = os.path.dirname(filepath)
        if dirname:
            os.makedirs(dirname, exist_ok=True)

        # Create a lock file alongside the target JSON file
        lock_file = f"{filepath}.lock"
        with FileLock(lock_file):  # pylint: disable=abstract-class-instantiated
            temp_filepath = f"{filepath}.tmp"  # Use a temporary file for atomic writes
            with open(temp_filepath, "w") as json_file:
                json.dump(self.to_dict(), json_file, indent=4)

            os.replace(temp_filepath, filepath)

        LOG.debug(f"Report successfully dumped to {filepath}.")

    @classmethod
    def load_from_json_file(cls: Type[R], filepath: str) -> R:
        """
        Load a report stored in a JSON file.

        Args:
            filepath: The path to the JSON file where the data is located.

        Raises:
            ValueError: If the `filepath` is not provided or is invalid.
        """
        if not filepath or not os.path.exists(filepath):
            raise ValueError("A valid file path must be provided.")

        lock_file = f"{filepath}.lock"
        with FileLock(lock_file):  # pylint: disable=abstract-class-instantiated
            with open(filepath, "r") as json_file:
                data = json.load(json_file)

        return cls.from_dict(data)
