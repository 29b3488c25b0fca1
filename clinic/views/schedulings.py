"""
Scheduling endpoints.

Same access rules as pets, but a scheduling is deleted physically.
"""
from __future__ import annotations

from rest_framework import status
from rest_framework.decorators import api_view, throttle_classes
from rest_framework.exceptions import NotFound
from rest_framework.response import Response

from clinic.models import Scheduling
from clinic.pagination import paginate
from clinic.permissions import AccessPolicy, actor_for, ensure, is_superuser
from clinic.serializers.base import bind_input, save_resolved
from clinic.serializers.scheduling import SchedulingSerializer
from clinic.services.audit import log_action
from clinic.services.ownership import WriteVerb, resolve_owner
from clinic.throttling import SchedulingRateThrottle

policy = AccessPolicy()


@api_view(['GET', 'POST'])
@throttle_classes([SchedulingRateThrottle])
def schedulings(request):
    actor = actor_for(request)
    if request.method == 'GET':
        ensure(is_superuser(actor))
        return paginate(request, Scheduling.objects.order_by('date', 'id'), SchedulingSerializer)

    s = bind_input(SchedulingSerializer, request)
    save_resolved(s, resolve_owner(actor, WriteVerb.CREATE, s.validated_data))
    return Response({'data': s.data}, status=status.HTTP_201_CREATED)


@api_view(['GET', 'PUT', 'PATCH', 'DELETE'])
@throttle_classes([SchedulingRateThrottle])
def scheduling_detail(request, pk: int):
    scheduling = Scheduling.objects.filter(pk=pk).first()
    if not scheduling:
        raise NotFound('Scheduling not found.')
    actor = actor_for(request)

    if request.method == 'GET':
        ensure(policy.is_superuser_or_owner_of_scheduling(actor, scheduling.pk))
        return Response({'data': SchedulingSerializer(scheduling, context={'request': request}).data})

    if request.method == 'DELETE':
        ensure(policy.is_superuser_or_owner_of_scheduling(actor, scheduling.pk))
        scheduling.delete()
        log_action(user=request.user, action='scheduling_delete', object_type='scheduling', object_id=pk)
        return Response(status=status.HTTP_204_NO_CONTENT)

    s = bind_input(SchedulingSerializer, request, instance=scheduling)
    ensure(policy.is_superuser_or_owner_of_scheduling(actor, scheduling.pk))
    save_resolved(s, resolve_owner(actor, WriteVerb.from_method(request.method), s.validated_data))
    return Response({'data': s.data})
