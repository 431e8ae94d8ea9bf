##############################################################################
# Copyright (c) crudbench developers. See the top-level LICENSE file for
# dates and other details. No copyright assignment is required to contribute
# to crudbench.
##############################################################################

"""
Tests for the YAML, path and namespace helpers in the `utils.py` module.
"""

import os
from types import SimpleNamespace

import pytest
import yaml

from crudbench.utils import expand_path, get_yaml_var, load_yaml, nested_dict_to_namespaces


def test_load_yaml(tmp_path):
    """
    Test that a YAML file is read into a dict.

    Args:
        tmp_path: A built in pytest fixture providing a temporary directory.
    """
    filepath = tmp_path / "app.yaml"
    filepath.write_text(yaml.safe_dump({"benchmark": {"runs": 4}}))
    assert load_yaml(str(filepath)) == {"benchmark": {"runs": 4}}


def test_load_yaml_empty_file(tmp_path):
    """
    Test that an empty YAML file loads as None.

    Args:
        tmp_path: A built in pytest fixture providing a temporary directory.
    """
    filepath = tmp_path / "app.yaml"
    filepath.write_text("")
    assert load_yaml(str(filepath)) is None


@pytest.mark.parametrize(
    "entry, expected",
    [
        ({"runs": 3}, 3),
        (SimpleNamespace(runs=3), 3),
        ({"batch_size": 3}, "default"),
        (SimpleNamespace(), "default"),
        (None, "default"),
    ],
)
def test_get_yaml_var(entry, expected):
    """
    Test that values are found by key or attribute and fall back to the default.

    Args:
        entry: The dict or namespace to look in.
        expected: The value that should come back.
    """
    assert get_yaml_var(entry, "runs", "default") == expected


def test_expand_path(monkeypatch, tmp_path):
    """
    Test that the home directory and environment variables are expanded.

    Args:
        monkeypatch: A built in pytest fixture to patch the environment.
        tmp_path: A built in pytest fixture providing a temporary directory.
    """
    monkeypatch.setenv("HOME", str(tmp_path))
    monkeypatch.setenv("CRUDBENCH_TEST_DIR", "dbs")
    assert expand_path("~/$CRUDBENCH_TEST_DIR") == os.path.join(str(tmp_path), "dbs")


def test_expand_path_relative(monkeypatch, tmp_path):
    """
    Test that relative paths are made absolute against the current directory.

    Args:
        monkeypatch: A built in pytest fixture to patch the working directory.
        tmp_path: A built in pytest fixture providing a temporary directory.
    """
    monkeypatch.chdir(tmp_path)
    assert expand_path("db") == os.path.join(os.getcwd(), "db")


def test_nested_dict_to_namespaces():
    """Test that nested dicts become nested namespaces without touching the input."""
    dic = {"benchmark": {"runs": 2}, "name": "test-db"}
    namespaces = nested_dict_to_namespaces(dic)
    assert namespaces.benchmark.runs == 2
    assert namespaces.name == "test-db"
    assert dic == {"benchmark": {"runs": 2}, "name": "test-db"}


def test_nested_dict_to_namespaces_rejects_wrong_type():
    """Test that anything other than a dict raises a TypeError."""
    with pytest.raises(TypeError):
        nested_dict_to_namespaces(["not", "a", "dict"])
