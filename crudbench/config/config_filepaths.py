##############################################################################
# Copyright (c) crudbench developers. See the top-level LICENSE file for
# dates and other details. No copyright assignment is required to contribute
# to crudbench.
##############################################################################

"""
This module stores constants representing file paths that will be needed for
crudbench's configuration.
"""

import os


APP_FILENAME: str = "app.yaml"
USER_HOME: str = os.path.expanduser("~")
CRUDBENCH_HOME: str = os.path.join(USER_HOME, ".crudbench")
