# ------------------------------------------------------------------------------------------------ #
# Copyright (c) 2026 Carmenda. All rights reserved.                                                #
# This program is distributed under the terms of the GNU General Public License: GPL-3.0-or-later  #
# ------------------------------------------------------------------------------------------------ #

"""Read-only ViewSet for users and the books they own."""

from django.contrib.auth import get_user_model
from drf_spectacular.utils import extend_schema
from rest_framework import viewsets

from api.serializers import UserSerializer
from api.views.root import ApiTags


@extend_schema(tags=[ApiTags.USERS])
class UserViewSet(viewsets.ReadOnlyModelViewSet):
    """List users and retrieve a single user."""

    queryset = get_user_model().objects.prefetch_related('books').order_by('id')
    serializer_class = UserSerializer
    search_fields = ('username',)
    ordering_fields = ('id', 'username')
