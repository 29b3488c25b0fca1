"""
Ownership lookups used by the access policy.

The policy never walks the ORM object graph itself; it asks an
:class:`OwnershipRepository` for the owning user id of a resource.  The
Django implementation reads from the default (active only) managers, so
a soft-deleted pet has no owner and is reported as missing.
"""
from __future__ import annotations

import enum
from typing import Optional, Protocol

from .models import Pet, Scheduling


class ResourceKind(str, enum.Enum):
    PET = 'pet'
    SCHEDULING = 'scheduling'


class OwnershipRepository(Protocol):
    def find_owner_id(self, kind: ResourceKind, resource_id: int) -> Optional[int]:
        """Return the owner's user id, or ``None`` when the resource does not exist."""
        ...


class DjangoOwnershipRepository:
    """:class:`OwnershipRepository` backed by the clinic models."""

    querysets = {
        ResourceKind.PET: Pet.objects,
        ResourceKind.SCHEDULING: Scheduling.objects,
    }

    def find_owner_id(self, kind: ResourceKind, resource_id: int) -> Optional[int]:
        manager = self.querysets[ResourceKind(kind)]
        return manager.filter(pk=resource_id).values_list('user_id', flat=True).first()
