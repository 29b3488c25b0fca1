"""
Service catalogue endpoints, all reserved to superusers.

Reads and deletes check the role before anything else; writes are
validated first and refused afterwards.  Deleting a service only
clears its ``active`` flag.
"""
from __future__ import annotations

from rest_framework import status
from rest_framework.decorators import api_view, throttle_classes
from rest_framework.exceptions import NotFound
from rest_framework.response import Response

from clinic.models import Service
from clinic.pagination import paginate
from clinic.permissions import actor_for, ensure, is_superuser
from clinic.serializers.base import bind_input
from clinic.serializers.service import ServiceSerializer
from clinic.services.audit import log_action
from clinic.throttling import ResourceRateThrottle


@api_view(['GET', 'POST'])
@throttle_classes([ResourceRateThrottle])
def services(request):
    actor = actor_for(request)
    if request.method == 'GET':
        ensure(is_superuser(actor))
        return paginate(request, Service.objects.order_by('id'), ServiceSerializer)

    s = bind_input(ServiceSerializer, request)
    ensure(is_superuser(actor))
    s.save()
    return Response({'data': s.data}, status=status.HTTP_201_CREATED)


@api_view(['GET', 'PUT', 'PATCH', 'DELETE'])
@throttle_classes([ResourceRateThrottle])
def service_detail(request, pk: int):
    actor = actor_for(request)
    if request.method in ('GET', 'DELETE'):
        ensure(is_superuser(actor))

    service = Service.objects.filter(pk=pk).first()
    if not service:
        raise NotFound('Service not found.')

    if request.method == 'GET':
        return Response({'data': ServiceSerializer(service, context={'request': request}).data})

    if request.method == 'DELETE':
        service.active = False
        service.save(update_fields=['active', 'updated_at'])
        log_action(user=request.user, action='service_delete', object_type='service', object_id=service.pk)
        return Response(status=status.HTTP_204_NO_CONTENT)

    s = bind_input(ServiceSerializer, request, instance=service)
    ensure(is_superuser(actor))
    s.save()
    return Response({'data': s.data})
