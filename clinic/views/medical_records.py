"""
Medical record endpoints.

Staff members write records; listing, reading, updating and deleting
them is reserved to superusers.  ``GET /medicalrecords/result?code=``
lets any authenticated user read the record an access code points at,
without an ownership check.
"""
from __future__ import annotations

from rest_framework import status
from rest_framework.decorators import api_view, throttle_classes
from rest_framework.exceptions import NotFound
from rest_framework.response import Response

from clinic.models import MedicalRecord
from clinic.pagination import paginate
from clinic.permissions import actor_for, ensure, is_staff, is_superuser
from clinic.serializers.base import bind_input
from clinic.serializers.medical_record import AccessCodeQuerySerializer, MedicalRecordSerializer
from clinic.services.audit import log_action
from clinic.throttling import ResourceRateThrottle


@api_view(['GET', 'POST'])
@throttle_classes([ResourceRateThrottle])
def medical_records(request):
    actor = actor_for(request)
    if request.method == 'GET':
        ensure(is_superuser(actor))
        return paginate(request, MedicalRecord.objects.order_by('id'), MedicalRecordSerializer)

    s = bind_input(MedicalRecordSerializer, request)
    ensure(is_staff(actor))
    record = s.save()
    log_action(user=request.user, action='medical_record_create', object_type='medical_record',
               object_id=record.pk, detail={'pet_id': record.pet_id})
    return Response({'data': s.data}, status=status.HTTP_201_CREATED)


@api_view(['GET'])
@throttle_classes([ResourceRateThrottle])
def medical_record_result(request):
    q = AccessCodeQuerySerializer(data=request.query_params)
    q.is_valid(raise_exception=True)
    record = MedicalRecord.objects.filter(access_code=q.validated_data['code']).first()
    if not record:
        raise NotFound('Medical record not found.')
    return Response({'data': MedicalRecordSerializer(record, context={'request': request}).data})


@api_view(['GET', 'PUT', 'PATCH', 'DELETE'])
@throttle_classes([ResourceRateThrottle])
def medical_record_detail(request, pk: int):
    actor = actor_for(request)
    if request.method in ('GET', 'DELETE'):
        ensure(is_superuser(actor))

    record = MedicalRecord.objects.filter(pk=pk).first()
    if not record:
        raise NotFound('Medical record not found.')

    if request.method == 'GET':
        return Response({'data': MedicalRecordSerializer(record, context={'request': request}).data})

    if request.method == 'DELETE':
        record.delete()
        log_action(user=request.user, action='medical_record_delete', object_type='medical_record', object_id=pk)
        return Response(status=status.HTTP_204_NO_CONTENT)

    s = bind_input(MedicalRecordSerializer, request, instance=record)
    ensure(is_superuser(actor))
    s.save()
    return Response({'data': s.data})
