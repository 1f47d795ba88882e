# ------------------------------------------------------------------------------------------------ #
# Copyright (c) 2026 Carmenda. All rights reserved.                                                #
# This program is distributed under the terms of the GNU General Public License: GPL-3.0-or-later  #
# ------------------------------------------------------------------------------------------------ #

"""Token authentication endpoint."""

from __future__ import annotations

from typing import TYPE_CHECKING

from drf_spectacular.utils import extend_schema
from rest_framework.authtoken.views import ObtainAuthToken

from api.schemas import TOKEN_SCHEMA
from api.utils.logger import setup_logging
from api.views.root import ApiTags

if TYPE_CHECKING:
    from rest_framework.request import Request
    from rest_framework.response import Response

logger = setup_logging()


@extend_schema(tags=[ApiTags.AUTH])
class TokenView(ObtainAuthToken):
    """Exchange a username and password for an API token."""

    @TOKEN_SCHEMA
    def post(self, request: Request, *args: object, **kwargs: object) -> Response:
        """Return the (existing or new) token of the authenticated user."""
        response = super().post(request, *args, **kwargs)
        logger.info('Issued API token for "%s"', request.data.get('username'))
        return response
