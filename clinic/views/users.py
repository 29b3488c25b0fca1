"""
User endpoints.

Listing is reserved to superusers, anyone may sign up, and a user may
read, update or delete their own account.  Deleting a user is a soft
delete: ``is_active`` is cleared and the user's tokens are revoked.
"""
from __future__ import annotations

from rest_framework import status
from rest_framework.authtoken.models import Token
from rest_framework.decorators import api_view, permission_classes, throttle_classes
from rest_framework.exceptions import NotFound
from rest_framework.response import Response

from clinic.models import User
from clinic.pagination import paginate
from clinic.permissions import (
    IsAuthenticatedOrSignup,
    actor_for,
    ensure,
    is_superuser,
    is_superuser_or_self,
)
from clinic.serializers.base import bind_input, save_resolved
from clinic.serializers.user import UserSerializer
from clinic.services.audit import log_action
from clinic.services.ownership import resolve_role_flags
from clinic.throttling import ResourceRateThrottle


def _get_user(pk: int) -> User:
    user = User.objects.active().prefetch_related('pets', 'schedulings').filter(pk=pk).first()
    if not user:
        raise NotFound('User not found.')
    return user


@api_view(['GET', 'POST'])
@permission_classes([IsAuthenticatedOrSignup])
@throttle_classes([ResourceRateThrottle])
def users(request):
    if request.method == 'GET':
        ensure(is_superuser(actor_for(request)))
        qs = User.objects.active().prefetch_related('pets', 'schedulings').order_by('id')
        return paginate(request, qs, UserSerializer)

    s = bind_input(UserSerializer, request)
    actor = actor_for(request) if request.user else None
    save_resolved(s, resolve_role_flags(actor, s.validated_data))
    return Response({'data': s.data}, status=status.HTTP_201_CREATED)


@api_view(['GET', 'PUT', 'PATCH', 'DELETE'])
@throttle_classes([ResourceRateThrottle])
def user_detail(request, pk: int):
    user = _get_user(pk)
    actor = actor_for(request)

    if request.method == 'GET':
        ensure(is_superuser_or_self(actor, user.pk))
        return Response({'data': UserSerializer(user, context={'request': request}).data})

    if request.method == 'DELETE':
        ensure(is_superuser_or_self(actor, user.pk))
        user.is_active = False
        user.save(update_fields=['is_active', 'updated_at'])
        Token.objects.filter(user=user).delete()
        log_action(user=request.user, action='user_delete', object_type='user', object_id=user.pk)
        return Response(status=status.HTTP_204_NO_CONTENT)

    s = bind_input(UserSerializer, request, instance=user)
    ensure(is_superuser_or_self(actor, user.pk))
    save_resolved(s, resolve_role_flags(actor, s.validated_data))
    return Response({'data': s.data})
