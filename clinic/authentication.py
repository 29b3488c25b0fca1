"""
Bearer token authentication for the clinic API.

Clients send ``Authorization: Bearer <key>`` where ``<key>`` is the
token returned by ``POST /api/v1/auth``.  Keeping the class in its own
module gives the settings a stable import path and avoids circular
imports when Django REST framework loads authentication classes.
"""
from __future__ import annotations

from rest_framework import authentication, exceptions


class TokenAuthentication(authentication.TokenAuthentication):
    """DRF token authentication using the ``Bearer`` keyword.

    Tokens that belong to a soft-deleted (inactive) user are rejected
    with the same message as an unknown token.
    """

    keyword = 'Bearer'

    def authenticate_credentials(self, key):
        model = self.get_model()
        try:
            token = model.objects.select_related('user').get(key=key)
        except model.DoesNotExist:
            raise exceptions.AuthenticationFailed('Unauthenticated.')

        if not token.user.is_active:
            raise exceptions.AuthenticationFailed('Unauthenticated.')

        return (token.user, token)
