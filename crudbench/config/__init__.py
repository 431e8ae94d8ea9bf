##############################################################################
# Copyright (c) crudbench developers. See the top-level LICENSE file for
# dates and other details. No copyright assignment is required to contribute
# to crudbench.
##############################################################################

"""
Used to store the application configuration.

The `config` package provides functionality for loading and holding the settings
that drive a benchmark: how many runs, how large each batch is, and where the
embedded database lives.

Modules:
    config_filepaths.py: Constants for the locations of configuration files.
    configfile.py: Handles the loading, defaulting and writing of `app.yaml`.
"""
from copy import copy
from types import SimpleNamespace
from typing import Dict, List, Optional

from crudbench.utils import nested_dict_to_namespaces


# Pylint complains that there's too few methods here but this class might
# be useful if we ever need to do extra stuff with the configuration so we'll
# ignore it for now
class Config:  # pylint: disable=R0903
    """
    The Config class, meant to store all crudbench settings in one place.

    Attributes:
        benchmark (Optional[SimpleNamespace]): A namespace containing the benchmark sizing settings
            (`runs`, `batch_size`, `warmup_size`, `one_by_one_divisor`).
        database (Optional[SimpleNamespace]): A namespace containing the embedded database settings
            (`name`, `directory`, `in_memory`, `journal_mode`, `echo`).

    Methods:
        __copy__: Creates a shallow copy of the Config instance.
        __str__: Returns a formatted string representation of the Config instance.
        load_app_into_namespaces: Converts the provided configuration dictionary into namespaces
            and assigns them to the Config instance's attributes.
    """

    SECTIONS: List[str] = ["benchmark", "database"]

    def __init__(self, app_dict: Dict):
        """
        Initializes the Config instance with configuration data from a dictionary.

        Args:
            app_dict: A dictionary containing configuration data for the application.
                Each of the "benchmark" and "database" keys is converted into a
                `SimpleNamespace` and assigned to the matching attribute.
        """
        self.benchmark: Optional[SimpleNamespace] = None
        self.database: Optional[SimpleNamespace] = None
        self.load_app_into_namespaces(app_dict)

    def __copy__(self) -> "Config":
        """
        Creates a shallow copy of the Config instance.

        Returns:
            A new Config instance with copied `benchmark` and `database` attributes.
        """
        cls = self.__class__
        result = cls.__new__(cls)
        result.__dict__.update({section: copy(self.__dict__[section]) for section in self.SECTIONS})
        return result

    def __str__(self) -> str:
        """
        Returns a formatted string representation of the Config instance.

        Returns:
            str: A string containing the values of the `benchmark` and `database` attributes.
        """
        formatted_str = "config:"
        for name in self.SECTIONS:
            attr = getattr(self, name)
            if attr is not None:
                items = (f"    {k}: {v!r}" for k, v in attr.__dict__.items())
                joined_items = "\n".join(items)
                formatted_str += f"\n  {name}:\n{joined_items}"
            else:
                formatted_str += f"\n  {name}:\n    None"
        return formatted_str

    def load_app_into_namespaces(self, app_dict: Dict):
        """
        Converts the provided application dictionary into namespaces and assigns them
        to the Config instance's attributes.

        Args:
            app_dict: A dictionary containing configuration data for the application.
        """
        for field in self.SECTIONS:
            try:
                setattr(self, field, nested_dict_to_namespaces(app_dict[field]))
            except KeyError:
                # The sections are optional
                pass
