# ------------------------------------------------------------------------------------------------ #
# Copyright (c) 2025 Carmenda. All rights reserved.                                                #
# This program is distributed under the terms of the GNU General Public License: GPL-3.0-or-later  #
# ------------------------------------------------------------------------------------------------ #

"""API models for the shared book collection."""

from django.conf import settings
from django.db import models

ISBN_LENGTH = 13


class Book(models.Model):
    """A book record owned by the user that added it."""

    title = models.CharField(max_length=200)
    author = models.CharField(max_length=100)
    isbn = models.CharField(max_length=ISBN_LENGTH, unique=True, verbose_name='ISBN')
    published_date = models.DateField()
    pages = models.PositiveIntegerField()
    owner = models.ForeignKey(settings.AUTH_USER_MODEL, on_delete=models.CASCADE, related_name='books')
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        ordering = ('-published_date', 'title')

    def __str__(self) -> str:
        """Return a string representation of the book."""
        return f'{self.title} by {self.author}'
