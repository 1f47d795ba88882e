# ------------------------------------------------------------------------------------------------ #
# Copyright (c) 2025 Carmenda. All rights reserved.                                                #
# This program is distributed under the terms of the GNU General Public License: GPL-3.0-or-later  #
# ------------------------------------------------------------------------------------------------ #

"""Main package for the Django project.

This package contains the settings, logging configuration and URL root of the
bookshelf API. Both WSGI and ASGI entry points are provided.
"""
