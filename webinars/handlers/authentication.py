"""Acting-user resolution.

Real authentication lives outside this service. The caller's identity is
taken from the X-User-Id header, or the configured default user.
"""

from django.conf import settings
from rest_framework.authentication import BaseAuthentication
from rest_framework.request import Request

from webinars.domain import User, UserId

USER_ID_HEADER = "HTTP_X_USER_ID"


class HeaderUserAuthentication(BaseAuthentication):
    def authenticate(self, request: Request) -> tuple[User, None]:
        user_id = request.META.get(USER_ID_HEADER) or settings.WEBINARS_DEFAULT_USER_ID
        return User(id=UserId(user_id)), None
