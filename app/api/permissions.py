# ------------------------------------------------------------------------------------------------ #
# Copyright (c) 2026 Carmenda. All rights reserved.                                                #
# This program is distributed under the terms of the GNU General Public License: GPL-3.0-or-later  #
# ------------------------------------------------------------------------------------------------ #

"""Object level permissions for the book collection."""

from __future__ import annotations

from typing import TYPE_CHECKING

from rest_framework import permissions

if TYPE_CHECKING:
    from rest_framework.request import Request
    from rest_framework.views import APIView

    from api.models import Book


class IsOwnerOrReadOnly(permissions.BasePermission):
    """Allow everyone to read a book, but only its owner (or staff) to change it."""

    message = 'Only the owner of this book can modify it.'

    def has_object_permission(self, request: Request, view: APIView, obj: Book) -> bool:
        """Safe methods are always allowed, writes require ownership."""
        if request.method in permissions.SAFE_METHODS:
            return True

        if request.user and request.user.is_staff:
            return True

        return obj.owner_id == request.user.pk
