# ------------------------------------------------------------------------------------------------ #
# Copyright (c) 2026 Carmenda. All rights reserved.                                                #
# This program is distributed under the terms of the GNU General Public License: GPL-3.0-or-later  #
# ------------------------------------------------------------------------------------------------ #

"""ViewSet for managing the book collection."""

from __future__ import annotations

import datetime
from typing import TYPE_CHECKING

from django.conf import settings
from django.db import IntegrityError, transaction
from django.utils import timezone
from drf_spectacular.utils import extend_schema, extend_schema_view
from rest_framework import permissions, serializers, viewsets
from rest_framework.decorators import action
from rest_framework.response import Response

from api.models import Book
from api.permissions import IsOwnerOrReadOnly
from api.schemas import CREATE_BOOK_SCHEMA, LIST_BOOKS_SCHEMA, RECENT_BOOKS_SCHEMA
from api.serializers import DUPLICATE_ISBN_MESSAGE, BookListSerializer, BookSerializer
from api.utils.logger import setup_logging
from api.utils.validators import parse_days
from api.views.root import ApiTags

if TYPE_CHECKING:
    from django.db.models import QuerySet
    from rest_framework.request import Request
    from rest_framework.serializers import BaseSerializer

logger = setup_logging()


@extend_schema(tags=[ApiTags.BOOKS])
@extend_schema_view(list=LIST_BOOKS_SCHEMA, create=CREATE_BOOK_SCHEMA)
class BookViewSet(viewsets.ModelViewSet):
    """List, create, retrieve, update and delete books.

    Anyone may read; authenticated users may add books and change their own.
    """

    queryset = Book.objects.select_related('owner')
    serializer_class = BookSerializer
    permission_classes = (permissions.IsAuthenticatedOrReadOnly, IsOwnerOrReadOnly)
    search_fields = ('title', 'author', 'isbn')
    ordering_fields = ('title', 'author', 'published_date', 'pages', 'created_at')

    def get_queryset(self) -> QuerySet[Book]:
        """Return the books, optionally filtered with `?author=`."""
        queryset = super().get_queryset()
        author = self.request.query_params.get('author')

        if author:
            queryset = queryset.filter(author__icontains=author.strip())
        return queryset

    def get_serializer_class(self) -> type[BookSerializer | BookListSerializer]:
        """Return the appropriate serializer based on the action."""
        if self.action in ['list', 'recent']:
            return BookListSerializer
        return BookSerializer

    def permission_denied(self, request: Request, message: str | None = None, code: str | None = None) -> None:
        """Log refused requests before the framework turns them into a 401/403."""
        logger.warning('Denied %s %s for user "%s"', request.method, request.path, request.user)
        super().permission_denied(request, message=message, code=code)

    def _save(self, serializer: BaseSerializer, **kwargs: object) -> Book:
        """Save a book, reporting an ISBN taken by a concurrent request as a validation error."""
        try:
            with transaction.atomic():
                return serializer.save(**kwargs)
        except IntegrityError as error:
            logger.warning('Duplicate ISBN %s rejected by the database', serializer.validated_data.get('isbn'))
            raise serializers.ValidationError({'isbn': [DUPLICATE_ISBN_MESSAGE]}) from error

    def perform_create(self, serializer: BaseSerializer) -> None:
        """Store the requesting user as owner of the new book."""
        book = self._save(serializer, owner=self.request.user)
        logger.info('Book %s "%s" created by %s', book.pk, book.title, self.request.user)

    def perform_update(self, serializer: BaseSerializer) -> None:
        """Save changes to a book."""
        book = self._save(serializer)
        logger.info('Book %s "%s" updated by %s', book.pk, book.title, self.request.user)

    def perform_destroy(self, instance: Book) -> None:
        """Delete a book."""
        book_id, title = instance.pk, instance.title
        super().perform_destroy(instance)
        logger.info('Book %s "%s" deleted by %s', book_id, title, self.request.user)

    @RECENT_BOOKS_SCHEMA
    @action(detail=False, methods=['get'])
    def recent(self, request: Request) -> Response:
        """List books published within the last `?days=` days (newest first)."""
        days = parse_days(request.query_params.get('days'), default=settings.RECENT_BOOKS_DAYS)
        today = timezone.localdate()
        since = today - datetime.timedelta(days=days)

        queryset = self.filter_queryset(self.get_queryset()).filter(
            published_date__gte=since,
            published_date__lte=today,
        )

        page = self.paginate_queryset(queryset)
        if page is not None:
            serializer = self.get_serializer(page, many=True)
            return self.get_paginated_response(serializer.data)

        serializer = self.get_serializer(queryset, many=True)
        return Response(serializer.data)
