# ------------------------------------------------------------------------------------------------ #
# Copyright (c) 2026 Carmenda. All rights reserved.                                                #
# This program is distributed under the terms of the GNU General Public License: GPL-3.0-or-later  #
# ------------------------------------------------------------------------------------------------ #

"""Tests for the read-only user endpoints."""

from __future__ import annotations

from typing import TYPE_CHECKING

import pytest
from django.urls import reverse
from rest_framework import status

if TYPE_CHECKING:
    from django.contrib.auth.models import AbstractUser
    from rest_framework.test import APIClient

    from api.models import Book

pytestmark = pytest.mark.django_db


class TestUsers:
    """GET /api/v1/users/ and /api/v1/users/{id}/."""

    def test_list(self, api_client: APIClient, user: AbstractUser, other_user: AbstractUser) -> None:
        """Users are listed in creation order."""
        response = api_client.get(reverse('users-list'))

        assert response.status_code == status.HTTP_200_OK
        assert [item['username'] for item in response.data['results']] == ['alice', 'bob']

    def test_detail_lists_owned_books(self, api_client: APIClient, user: AbstractUser, book: Book) -> None:
        """A user exposes the ids of the books they own."""
        response = api_client.get(reverse('users-detail', kwargs={'pk': user.pk}))

        assert response.status_code == status.HTTP_200_OK
        assert response.data == {'id': user.pk, 'username': 'alice', 'books': [book.pk]}

    def test_create_not_allowed(self, auth_client: APIClient) -> None:
        """Users cannot be created through the API."""
        response = auth_client.post(reverse('users-list'), {'username': 'eve'})

        assert response.status_code == status.HTTP_405_METHOD_NOT_ALLOWED
