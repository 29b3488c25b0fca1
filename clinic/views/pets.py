"""
Pet endpoints.

Any authenticated user may register a pet; reading, updating and
deleting one is limited to its owner and superusers.  Only active pets
are visible and deleting a pet only clears its ``active`` flag.
"""
from __future__ import annotations

from rest_framework import status
from rest_framework.decorators import api_view, throttle_classes
from rest_framework.exceptions import NotFound
from rest_framework.response import Response

from clinic.models import Pet
from clinic.pagination import paginate
from clinic.permissions import AccessPolicy, actor_for, ensure, is_superuser
from clinic.serializers.base import bind_input, save_resolved
from clinic.serializers.pet import PetSerializer
from clinic.services.audit import log_action
from clinic.services.ownership import WriteVerb, resolve_owner
from clinic.throttling import ResourceRateThrottle

policy = AccessPolicy()


@api_view(['GET', 'POST'])
@throttle_classes([ResourceRateThrottle])
def pets(request):
    actor = actor_for(request)
    if request.method == 'GET':
        ensure(is_superuser(actor))
        return paginate(request, Pet.objects.order_by('id'), PetSerializer)

    s = bind_input(PetSerializer, request)
    save_resolved(s, resolve_owner(actor, WriteVerb.CREATE, s.validated_data))
    return Response({'data': s.data}, status=status.HTTP_201_CREATED)


@api_view(['GET', 'PUT', 'PATCH', 'DELETE'])
@throttle_classes([ResourceRateThrottle])
def pet_detail(request, pk: int):
    pet = Pet.objects.filter(pk=pk).first()
    if not pet:
        raise NotFound('Pet not found.')
    actor = actor_for(request)

    if request.method == 'GET':
        ensure(policy.is_superuser_or_owner_of_pet(actor, pet.pk))
        return Response({'data': PetSerializer(pet, context={'request': request}).data})

    if request.method == 'DELETE':
        ensure(policy.is_superuser_or_owner_of_pet(actor, pet.pk))
        pet.active = False
        pet.save(update_fields=['active', 'updated_at'])
        log_action(user=request.user, action='pet_delete', object_type='pet', object_id=pet.pk)
        return Response(status=status.HTTP_204_NO_CONTENT)

    s = bind_input(PetSerializer, request, instance=pet)
    ensure(policy.is_superuser_or_owner_of_pet(actor, pet.pk))
    save_resolved(s, resolve_owner(actor, WriteVerb.from_method(request.method), s.validated_data))
    return Response({'data': s.data})
