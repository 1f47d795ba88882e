# ------------------------------------------------------------------------------------------------ #
# Copyright (c) 2026 Carmenda. All rights reserved.                                                #
# This program is distributed under the terms of the GNU General Public License: GPL-3.0-or-later  #
# ------------------------------------------------------------------------------------------------ #

"""Validators for checking book data sent to the API."""

from __future__ import annotations

import datetime
import re

from django.utils import timezone
from rest_framework import serializers

from api.models import ISBN_LENGTH

ISBN_SEPARATORS = re.compile(r'[\s-]')
ASCII_DIGITS = re.compile(r'[0-9]+')
MAX_RECENT_DAYS = 36500


def normalize_isbn(value: str) -> str:
    """Remove hyphens and whitespace that are commonly used to group an ISBN."""
    return ISBN_SEPARATORS.sub('', value)


def isbn13_checksum_is_valid(isbn: str) -> bool:
    """Check the ISBN-13 check digit (alternating weights of 1 and 3, modulo 10)."""
    total = sum(int(digit) * (3 if index % 2 else 1) for index, digit in enumerate(isbn))
    return total % 10 == 0


def validate_isbn(value: str) -> str:
    """Validate that `value` is a (normalized) ISBN-13.

    1. Exactly 13 characters
    2. ASCII digits only
    3. Valid check digit
    """
    isbn = normalize_isbn(value)

    if len(isbn) != ISBN_LENGTH:
        message = f'ISBN must contain exactly {ISBN_LENGTH} digits, got {len(isbn)}.'
        raise serializers.ValidationError(message)

    if not ASCII_DIGITS.fullmatch(isbn):
        message = 'ISBN may only contain digits, hyphens and spaces.'
        raise serializers.ValidationError(message)

    if not isbn13_checksum_is_valid(isbn):
        message = f'ISBN "{isbn}" has an invalid check digit.'
        raise serializers.ValidationError(message)

    return isbn


def validate_pages(value: int) -> int:
    """Validate that a book has at least one page."""
    if value < 1:
        message = 'A book must have at least 1 page.'
        raise serializers.ValidationError(message)

    return value


def validate_published_date(value: datetime.date) -> datetime.date:
    """Validate that the publication date does not lie in the future."""
    today = timezone.localdate()

    if value > today:
        message = f'Publication date {value.isoformat()} lies in the future.'
        raise serializers.ValidationError({'published_date': message})

    return value


def parse_days(value: str | None, default: int) -> int:
    """Parse the `days` query parameter, falling back to `default` when absent."""
    if value in (None, ''):
        return default

    try:
        days = int(value)
    except (TypeError, ValueError) as error:
        message = f'Query parameter "days" must be an integer, got "{value}".'
        raise serializers.ValidationError({'days': message}) from error

    if not 1 <= days <= MAX_RECENT_DAYS:
        message = f'Query parameter "days" must be between 1 and {MAX_RECENT_DAYS}.'
        raise serializers.ValidationError({'days': message})

    return days
