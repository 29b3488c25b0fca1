"""
Authentication views.

``POST /api/v1/auth`` exchanges e-mail and password for a bearer token
and ``POST /api/v1/logout`` revokes the token the request was made
with.  Both are audited.
"""
from __future__ import annotations

from django.contrib.auth import authenticate
from rest_framework import status
from rest_framework.authtoken.models import Token
from rest_framework.decorators import api_view, permission_classes, throttle_classes
from rest_framework.permissions import AllowAny, IsAuthenticated
from rest_framework.response import Response

from clinic.serializers.auth import LoginSerializer
from clinic.services.audit import client_ip, log_action
from clinic.throttling import LoginRateThrottle

LOGIN_FAILED_MESSAGE = 'These credentials do not match our records.'


@api_view(['POST'])
@permission_classes([AllowAny])
@throttle_classes([LoginRateThrottle])
def login_view(request):
    """Log in with e-mail and password; answers ``{token, name, email}``."""
    s = LoginSerializer(data=request.data)
    s.is_valid(raise_exception=True)
    email = s.validated_data['email']

    user = authenticate(request, email=email, password=s.validated_data['password'])
    if not user:
        log_action(user=None, action='login', object_type='user', object_id=None,
                   detail={'result': 'fail', 'email': email, 'ip': client_ip(request)})
        return Response({'message': LOGIN_FAILED_MESSAGE}, status=status.HTTP_403_FORBIDDEN)

    log_action(user=user, action='login', object_type='user', object_id=user.id,
               detail={'result': 'ok', 'ip': client_ip(request)})

    token, _ = Token.objects.get_or_create(user=user)
    return Response({'token': token.key, 'name': user.first_name, 'email': user.email}, status=status.HTTP_200_OK)


@api_view(['POST'])
@permission_classes([IsAuthenticated])
@throttle_classes([LoginRateThrottle])
def logout_view(request):
    """Delete the token used for this request."""
    if request.auth is not None:
        request.auth.delete()
    log_action(user=request.user, action='logout', object_type='user', object_id=request.user.id,
               detail={'ip': client_ip(request)})
    return Response(status=status.HTTP_204_NO_CONTENT)
