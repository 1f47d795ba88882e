# ------------------------------------------------------------------------------------------------ #
# Copyright (c) 2026 Carmenda. All rights reserved.                                                #
# This program is distributed under the terms of the GNU General Public License: GPL-3.0-or-later  #
# ------------------------------------------------------------------------------------------------ #

"""Shared fixtures for the bookshelf API tests."""

from __future__ import annotations

import datetime
import itertools
from typing import TYPE_CHECKING

import pytest
from django.utils import timezone
from rest_framework.test import APIClient

from api.models import Book

if TYPE_CHECKING:
    from collections.abc import Callable

    from django.contrib.auth.models import AbstractUser


def make_isbn(number: int) -> str:
    """Build a valid ISBN-13 from a 978 prefix, a serial number and its check digit."""
    body = f'978{number:09d}'
    total = sum(int(digit) * (3 if index % 2 else 1) for index, digit in enumerate(body))
    return f'{body}{(10 - total % 10) % 10}'


# ----------------------------------- USERS ------------------------------------ #


@pytest.fixture
def user(django_user_model: type[AbstractUser]) -> AbstractUser:
    """Regular user that owns books."""
    return django_user_model.objects.create_user(username='alice', password='s3cret-pass')


@pytest.fixture
def other_user(django_user_model: type[AbstractUser]) -> AbstractUser:
    """Regular user that does not own the test books."""
    return django_user_model.objects.create_user(username='bob', password='s3cret-pass')


@pytest.fixture
def staff_user(django_user_model: type[AbstractUser]) -> AbstractUser:
    """Staff user allowed to change any book."""
    return django_user_model.objects.create_user(username='librarian', password='s3cret-pass', is_staff=True)


# ---------------------------------- CLIENTS ----------------------------------- #


@pytest.fixture
def api_client() -> APIClient:
    """Anonymous API client."""
    return APIClient()


@pytest.fixture
def auth_client(user: AbstractUser) -> APIClient:
    """API client authenticated as the book owner."""
    client = APIClient()
    client.force_authenticate(user=user)
    return client


@pytest.fixture
def other_client(other_user: AbstractUser) -> APIClient:
    """API client authenticated as a user that owns nothing."""
    client = APIClient()
    client.force_authenticate(user=other_user)
    return client


@pytest.fixture
def staff_client(staff_user: AbstractUser) -> APIClient:
    """API client authenticated as staff."""
    client = APIClient()
    client.force_authenticate(user=staff_user)
    return client


# ----------------------------------- BOOKS ------------------------------------ #


@pytest.fixture
def book_factory(user: AbstractUser) -> Callable[..., Book]:
    """Create books with sensible defaults and unique ISBNs."""
    serial = itertools.count(1)

    def create(**kwargs: object) -> Book:
        number = next(serial)
        defaults = {
            'title': f'Book {number}',
            'author': 'Jane Doe',
            'isbn': make_isbn(number),
            'published_date': timezone.localdate() - datetime.timedelta(days=number),
            'pages': 100 + number,
            'owner': user,
        }
        defaults.update(kwargs)
        return Book.objects.create(**defaults)

    return create


@pytest.fixture
def book(book_factory: Callable[..., Book]) -> Book:
    """A single book owned by `user`."""
    return book_factory(
        title='The Hobbit',
        author='J.R.R. Tolkien',
        isbn='9780306406157',
        published_date=datetime.date(1937, 9, 21),
        pages=310,
    )


@pytest.fixture
def book_payload() -> dict:
    """Valid request body for creating a book."""
    return {
        'title': 'Fluent Python',
        'author': 'Luciano Ramalho',
        'isbn': '978-1-4919-4600-8',
        'published_date': '2015-08-20',
        'pages': 792,
    }
