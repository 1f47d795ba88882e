# ------------------------------------------------------------------------------------------------ #
# Copyright (c) 2026 Carmenda. All rights reserved.                                                #
# This program is distributed under the terms of the GNU General Public License: GPL-3.0-or-later  #
# ------------------------------------------------------------------------------------------------ #

"""Test configuration for the Django project."""

import os

# Keep test runs from writing to the application log file
os.environ.setdefault('LOG_TO_FILE', 'false')
