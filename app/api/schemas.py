# ------------------------------------------------------------------------------------------------ #
# Copyright (c) 2025 Carmenda. All rights reserved.                                                #
# This program is distributed under the terms of the GNU General Public License: GPL-3.0-or-later  #
# ------------------------------------------------------------------------------------------------ #

"""OpenAPI schema definitions for the API views."""

from drf_spectacular.types import OpenApiTypes
from drf_spectacular.utils import OpenApiParameter, extend_schema
from rest_framework import serializers

from api.serializers import BookListSerializer, BookSerializer


class APIRootResponseSerializer(serializers.Serializer):
    """Response serializer for API root view."""

    v1_books = serializers.URLField(source='v1/books', help_text='URL to the books list endpoint')
    v1_books_recent = serializers.URLField(
        source='v1/books/recent',
        help_text='URL to the recently published books endpoint',
    )
    v1_users = serializers.URLField(source='v1/users', help_text='URL to the users list endpoint')
    v1_auth_token = serializers.URLField(source='v1/auth/token', help_text='URL to obtain an API token')
    v1_docs = serializers.URLField(
        source='v1/docs',
        required=False,
        help_text='URL to the API documentation (only available in debug mode)',
    )
    v1_schema = serializers.URLField(
        source='v1/schema',
        required=False,
        help_text='URL to the API schema (only available in debug mode)',
    )


class TokenResponseSerializer(serializers.Serializer):
    """Response serializer for a successful token request."""

    token = serializers.CharField()


class ValidationErrorSerializer(serializers.Serializer):
    """Response serializer for query parameter validation errors."""

    days = serializers.ListField(child=serializers.CharField())


# Schema definitions for endpoints
API_ROOT_SCHEMA = extend_schema(
    responses={
        200: APIRootResponseSerializer,
    },
)

CREATE_BOOK_SCHEMA = extend_schema(
    responses={
        201: BookSerializer,
    },
)

RECENT_BOOKS_SCHEMA = extend_schema(
    parameters=[
        OpenApiParameter(
            name='days',
            type=OpenApiTypes.INT,
            location=OpenApiParameter.QUERY,
            required=False,
            description='Only include books published within this many days (defaults to RECENT_BOOKS_DAYS)',
        ),
        OpenApiParameter(
            name='author',
            type=OpenApiTypes.STR,
            location=OpenApiParameter.QUERY,
            required=False,
            description='Case-insensitive filter on (part of) the author name',
        ),
    ],
    responses={
        200: BookListSerializer(many=True),
        400: ValidationErrorSerializer,
    },
)

LIST_BOOKS_SCHEMA = extend_schema(
    parameters=[
        OpenApiParameter(
            name='author',
            type=OpenApiTypes.STR,
            location=OpenApiParameter.QUERY,
            required=False,
            description='Case-insensitive filter on (part of) the author name',
        ),
    ],
)

TOKEN_SCHEMA = extend_schema(
    responses={
        200: TokenResponseSerializer,
    },
)
