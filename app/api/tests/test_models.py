# ------------------------------------------------------------------------------------------------ #
# Copyright (c) 2026 Carmenda. All rights reserved.                                                #
# This program is distributed under the terms of the GNU General Public License: GPL-3.0-or-later  #
# ------------------------------------------------------------------------------------------------ #

"""Tests for the book model."""

from __future__ import annotations

import datetime
from typing import TYPE_CHECKING

import pytest
from django.db import IntegrityError

from api.models import Book

if TYPE_CHECKING:
    from collections.abc import Callable

    from django.contrib.auth.models import AbstractUser

pytestmark = pytest.mark.django_db


class TestBook:
    """Book records."""

    def test_str(self, book: Book) -> None:
        """Books read as title and author."""
        assert str(book) == 'The Hobbit by J.R.R. Tolkien'

    def test_default_ordering(self, book_factory: Callable[..., Book]) -> None:
        """Newest first, ties broken by title."""
        same_day = datetime.date(2001, 5, 5)
        book_factory(title='B', published_date=same_day)
        book_factory(title='A', published_date=same_day)
        book_factory(title='C', published_date=datetime.date(2010, 1, 1))

        assert [book.title for book in Book.objects.all()] == ['C', 'A', 'B']

    def test_isbn_unique(self, book: Book, book_factory: Callable[..., Book]) -> None:
        """The database refuses a second book with the same ISBN."""
        with pytest.raises(IntegrityError):
            book_factory(isbn=book.isbn)

    def test_related_books(self, user: AbstractUser, book: Book) -> None:
        """Owners reach their books through `books`."""
        assert list(user.books.all()) == [book]

    def test_owner_deletion_cascades(self, user: AbstractUser, book: Book) -> None:
        """Removing a user removes the books they own."""
        user.delete()

        assert not Book.objects.exists()
