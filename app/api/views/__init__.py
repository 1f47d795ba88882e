# ------------------------------------------------------------------------------------------------ #
# Copyright (c) 2026 Carmenda. All rights reserved.                                                #
# This program is distributed under the terms of the GNU General Public License: GPL-3.0-or-later  #
# ------------------------------------------------------------------------------------------------ #

"""API views package.

This package contains the API views for the bookshelf backend.
"""

from api.views.auth import TokenView
from api.views.books import BookViewSet
from api.views.root import APIRootView
from api.views.users import UserViewSet

__all__ = ['APIRootView', 'BookViewSet', 'TokenView', 'UserViewSet']
