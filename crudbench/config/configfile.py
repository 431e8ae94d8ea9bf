##############################################################################
# Copyright (c) crudbench developers. See the top-level LICENSE file for
# dates and other details. No copyright assignment is required to contribute
# to crudbench.
##############################################################################

"""
This module provides functionality for locating, loading and writing crudbench's
application configuration file (`app.yaml`) and filling in default settings.

It houses the `CONFIG` object that's used throughout crudbench's codebase.
"""
import logging
import os
from copy import copy
from typing import Any, Dict, Optional

import yaml

from crudbench.config import Config
from crudbench.config.config_filepaths import APP_FILENAME, CRUDBENCH_HOME
from crudbench.utils import dict_deep_merge, load_yaml


LOG: logging.Logger = logging.getLogger(__name__)

CONFIG: Optional[Config] = None


def get_default_config() -> Dict:
    """
    Creates the default configuration used when no `app.yaml` exists and to fill
    in keys that a user's `app.yaml` leaves out.

    Returns:
        A configuration dictionary with every setting at its default value.
    """
    return {
        "benchmark": {
            "runs": 8,
            "batch_size": 10000,
            "warmup_size": 100,
            "one_by_one_divisor": 10,
        },
        "database": {
            "name": "test-db",
            "directory": CRUDBENCH_HOME,
            "in_memory": False,
            "journal_mode": "WAL",
            "echo": False,
        },
    }


def load_config(filepath: str) -> Optional[Dict]:
    """
    Reads a crudbench YAML configuration file and returns its contents as a dictionary.

    Args:
        filepath: The path to the YAML configuration file.

    Returns:
        A dictionary containing the contents of the YAML file or None if file doesn't exist.
    """
    if not os.path.isfile(filepath):
        LOG.info(f"No app config file at {filepath}")
        return None
    LOG.info(f"Reading app config from file {filepath}")
    return load_yaml(filepath) or {}


def find_config_file(path: str = None) -> Optional[str]:
    """
    Locate the crudbench application configuration file (`app.yaml`).

    If no directory is provided the current working directory is checked first,
    followed by the crudbench home directory. If a `path` is explicitly provided,
    only that directory is checked.

    Args:
        path: A specific directory to look for `app.yaml`.

    Returns:
        The full path to the `app.yaml` file if found, otherwise `None`.
    """
    if path is None:
        local_app = os.path.join(os.getcwd(), APP_FILENAME)
        if os.path.isfile(local_app):
            return local_app

        path_app = os.path.join(CRUDBENCH_HOME, APP_FILENAME)
        if os.path.isfile(path_app):
            return path_app

        return None

    app_path = os.path.join(path, APP_FILENAME)
    if os.path.exists(app_path):
        return app_path

    return None


def load_defaults(config: Dict):
    """
    Fill every key missing from `config` with its default value. Values the
    user set are left untouched.

    Args:
        config: The configuration dictionary to be updated with default values.
    """
    # An empty section in YAML loads as None
    for section, value in list(config.items()):
        if value is None:
            config[section] = {}
    dict_deep_merge(config, get_default_config(), conflict_handler=lambda dict_a_val, **kwargs: dict_a_val)


def get_config(path: Optional[str] = None) -> Dict:
    """
    Loads a crudbench configuration file and returns a dictionary containing the
    configuration data. When no configuration file can be found the defaults are used.

    Args:
        path: The directory path to search for the configuration file.
            If `None`, default search paths are used.

    Returns:
        A dictionary containing all the configuration data.

    Raises:
        ValueError: If the configuration file does not hold a mapping.
    """
    filepath: Optional[str] = find_config_file(path)
    if filepath is None:
        LOG.debug("No app.yaml found, using default configuration")
        return get_default_config()

    config = load_config(filepath)
    if not isinstance(config, dict):
        raise ValueError(f"The configuration file '{filepath}' must contain a mapping, got {type(config).__name__}.")
    load_defaults(config)
    return config


def is_debug() -> bool:
    """
    Determines whether the application is running in debug mode.

    This function checks the environment variable `CRUDBENCH_DEBUG`. If the variable
    exists and its value is set to `1`, debug mode is enabled.

    Returns:
        True if `CRUDBENCH_DEBUG` is set to `1` in the environment, otherwise False.
    """
    if "CRUDBENCH_DEBUG" in os.environ and int(os.environ["CRUDBENCH_DEBUG"]) == 1:
        return True
    return False


def default_config_info() -> Dict:
    """
    Returns information about crudbench's default configurations.

    Returns:
        A dictionary containing the following keys:\n
            - `config_file` (str): Path to the crudbench configuration file.
            - `is_debug` (bool): Whether debug mode is enabled.
            - `crudbench_home` (str): Path to the crudbench home directory.
            - `crudbench_home_exists` (bool): True if the home directory exists, otherwise False.
    """
    return {
        "config_file": find_config_file(),
        "is_debug": is_debug(),
        "crudbench_home": CRUDBENCH_HOME,
        "crudbench_home_exists": os.path.exists(CRUDBENCH_HOME),
    }


def override_config(config: Config, section: str, **overrides: Any) -> Config:
    """
    Return a copy of `config` where the settings given in `overrides` replace
    the ones in `section`. Overrides whose value is None are ignored so that
    unset CLI flags don't clobber the configuration file.

    Args:
        config: The configuration to copy.
        section: The name of the section to override (e.g. "benchmark").
        **overrides: The settings to replace.

    Returns:
        A new `Config` object with the overrides applied.
    """
    new_config = copy(config)
    namespace = getattr(new_config, section)
    for key, value in overrides.items():
        if value is not None:
            LOG.debug(f"Overriding {section}.{key} with {value!r}")
            setattr(namespace, key, value)
    return new_config


def write_default_config(output_dir: str, force: bool = False) -> str:
    """
    Write the default configuration to `output_dir/app.yaml`.

    Args:
        output_dir: The directory to write the configuration file to.
        force: If True, overwrite an existing configuration file.

    Returns:
        The path to the written configuration file.

    Raises:
        FileExistsError: If the file already exists and `force` is False.
    """
    os.makedirs(output_dir, exist_ok=True)
    app_path = os.path.join(output_dir, APP_FILENAME)
    if os.path.exists(app_path) and not force:
        raise FileExistsError(f"The file '{app_path}' already exists. Use --force to overwrite it.")

    with open(app_path, "w") as app_file:
        yaml.safe_dump(get_default_config(), app_file, default_flow_style=False, sort_keys=False)

    LOG.info(f"Wrote default configuration to {app_path}")
    return app_path


def initialize_config(path: Optional[str] = None) -> Config:
    """
    Initializes and returns the crudbench configuration.

    This function can be used to explicitly initialize the configuration when needed,
    rather than relying on the module-level CONFIG constant.

    Args:
        path: Path to look for configuration file

    Returns:
        The initialized configuration object
    """
    global CONFIG  # pylint: disable=global-statement

    try:
        CONFIG = Config(get_config(path))
    except ValueError as e:
        LOG.warning(f"Error loading configuration: {e}. Falling back to default configuration.")
        CONFIG = Config(get_default_config())

    return CONFIG


initialize_config()
