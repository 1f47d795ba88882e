# ------------------------------------------------------------------------------------------------ #
# Copyright (c) 2025 Carmenda. All rights reserved.                                                #
# This program is distributed under the terms of the GNU General Public License: GPL-3.0-or-later  #
# ------------------------------------------------------------------------------------------------ #

"""URL configuration for the API (Django Rest Framework)."""

from django.conf import settings
from django.urls import include, path
from rest_framework.routers import DefaultRouter

from api.views import APIRootView, BookViewSet, TokenView, UserViewSet

router = DefaultRouter()
router.include_root_view = False
router.register('v1/books', BookViewSet, basename='books')
router.register('v1/users', UserViewSet, basename='users')

urlpatterns = [
    path('', APIRootView.as_view(), name='api-root'),
    path('v1/auth/token/', TokenView.as_view(), name='auth-token'),
    path('', include(router.urls)),
]

if settings.DEBUG:
    from drf_spectacular.views import SpectacularAPIView, SpectacularSwaggerView

    urlpatterns += [
        path('docs/', SpectacularSwaggerView.as_view(url_name='schema'), name='swagger-ui'),
        path('schema/', SpectacularAPIView.as_view(), name='schema'),
    ]
