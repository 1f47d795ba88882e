# ------------------------------------------------------------------------------------------------ #
# Copyright (c) 2025 Carmenda. All rights reserved.                                                #
# This program is distributed under the terms of the GNU General Public License: GPL-3.0-or-later  #
# ------------------------------------------------------------------------------------------------ #

"""Serializers for API endpoints handling books and their owners."""

from __future__ import annotations

from typing import ClassVar

from django.contrib.auth import get_user_model
from rest_framework import serializers
from rest_framework.validators import UniqueValidator

from api.models import Book
from api.utils.validators import normalize_isbn, validate_isbn, validate_pages, validate_published_date

DUPLICATE_ISBN_MESSAGE = 'A book with this ISBN already exists.'


class ISBNField(serializers.CharField):
    """Character field that strips ISBN grouping characters before validation."""

    def to_internal_value(self, data: object) -> str:
        """Normalize the incoming ISBN so uniqueness is checked on the stored form."""
        return normalize_isbn(super().to_internal_value(data))


class BookListSerializer(serializers.HyperlinkedModelSerializer):
    """Listing books with a link to their details."""

    url = serializers.HyperlinkedIdentityField(view_name='books-detail')

    class Meta:
        model = Book
        fields: ClassVar = ['id', 'url', 'title', 'author', 'published_date']
        read_only_fields: ClassVar = ['id', 'title', 'author', 'published_date']


class BookSerializer(serializers.ModelSerializer):
    """Validate and represent a complete book record."""

    isbn = ISBNField(
        validators=[UniqueValidator(queryset=Book.objects.all(), message=DUPLICATE_ISBN_MESSAGE)],
    )
    owner = serializers.ReadOnlyField(source='owner.username')

    class Meta:
        model = Book
        fields: ClassVar = [
            'id',
            'title',
            'author',
            'isbn',
            'published_date',
            'pages',
            'owner',
            'created_at',
            'updated_at',
        ]
        read_only_fields: ClassVar = ['id', 'owner', 'created_at', 'updated_at']

    def validate_title(self, value: str) -> str:
        """Collapse runs of whitespace inside the title."""
        return ' '.join(value.split())

    def validate_isbn(self, value: str) -> str:
        """Validate the ISBN-13 format and check digit."""
        return validate_isbn(value)

    def validate_pages(self, value: int) -> int:
        """Validate the page count."""
        return validate_pages(value)

    def validate(self, attrs: dict) -> dict:
        """Validate fields that depend on the current date.

        Skip validation:
            if the publication date is not part of a partial update (PATCH)
        """
        published_date = attrs.get('published_date')

        if published_date is not None:
            validate_published_date(published_date)

        return attrs


class UserSerializer(serializers.ModelSerializer):
    """Represent a user together with the books they own."""

    books = serializers.PrimaryKeyRelatedField(many=True, read_only=True)

    class Meta:
        model = get_user_model()
        fields: ClassVar = ['id', 'username', 'books']
        read_only_fields: ClassVar = ['id', 'username', 'books']
