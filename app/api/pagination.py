# ------------------------------------------------------------------------------------------------ #
# Copyright (c) 2026 Carmenda. All rights reserved.                                                #
# This program is distributed under the terms of the GNU General Public License: GPL-3.0-or-later  #
# ------------------------------------------------------------------------------------------------ #

"""Pagination for list endpoints."""

from django.conf import settings
from rest_framework.pagination import PageNumberPagination


class BookPagination(PageNumberPagination):
    """Page number pagination where clients may choose a (capped) page size.

    The default page size comes from `REST_FRAMEWORK['PAGE_SIZE']`.
    """

    page_size_query_param = 'page_size'
    max_page_size = settings.MAX_PAGE_SIZE
