"""
Access policy for the clinic API.

Authorization is expressed as small pure functions over an
:class:`Actor` (the authenticated identity of a request) plus an
:class:`AccessPolicy` for the checks that need to know who owns a pet or
a scheduling.  The DRF permission classes at the bottom of the module
are thin adapters used in ``@permission_classes`` on the views.

Every check answers ``True`` or ``False``; a denial is a normal outcome
and views turn it into ``PermissionDenied`` (HTTP 403).
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from rest_framework.exceptions import NotFound, PermissionDenied
from rest_framework.permissions import BasePermission

from .repositories import DjangoOwnershipRepository, OwnershipRepository, ResourceKind

UNAUTHORIZED_MESSAGE = 'This action is unauthorized.'


@dataclass(frozen=True)
class Actor:
    id: int
    is_staff: bool = False
    is_superuser: bool = False

    @classmethod
    def from_user(cls, user) -> "Actor":
        return cls(
            id=user.pk,
            is_staff=bool(getattr(user, 'is_staff', False)),
            is_superuser=bool(getattr(user, 'is_superuser', False)),
        )


def is_superuser(actor: Actor) -> bool:
    return bool(actor.is_superuser)


def is_staff(actor: Actor) -> bool:
    """Staff members may write medical records; superusers may too."""
    return bool(actor.is_staff or actor.is_superuser)


def is_superuser_or_self(actor: Actor, target_user_id: Optional[int]) -> bool:
    return is_superuser(actor) or actor.id == target_user_id


class AccessPolicy:
    """Ownership based checks for pets and schedulings.

    ``owners`` is any object with a ``find_owner_id(kind, id)`` method;
    tests pass an in-memory dictionary-backed one.  A superuser is
    allowed without a lookup.  For anyone else a resource that cannot
    be found raises :class:`NotFound`.
    """

    def __init__(self, owners: Optional[OwnershipRepository] = None):
        self.owners = owners or DjangoOwnershipRepository()

    def _is_superuser_or_owner(self, actor: Actor, kind: ResourceKind, resource_id: int) -> bool:
        if is_superuser(actor):
            return True
        owner_id = self.owners.find_owner_id(kind, resource_id)
        if owner_id is None:
            raise NotFound(f'{kind.value.capitalize()} not found.')
        return owner_id == actor.id

    def is_superuser_or_owner_of_pet(self, actor: Actor, pet_id: int) -> bool:
        return self._is_superuser_or_owner(actor, ResourceKind.PET, pet_id)

    def is_superuser_or_owner_of_scheduling(self, actor: Actor, scheduling_id: int) -> bool:
        return self._is_superuser_or_owner(actor, ResourceKind.SCHEDULING, scheduling_id)


def ensure(allowed: bool) -> None:
    """Raise the standard 403 when a policy check failed."""
    if not allowed:
        raise PermissionDenied(UNAUTHORIZED_MESSAGE)


def actor_for(request) -> Actor:
    return Actor.from_user(request.user)


class IsAuthenticatedOrSignup(BasePermission):
    """Anyone may POST (public signup); every other method needs a token."""

    def has_permission(self, request, view) -> bool:  # type: ignore[override]
        if request.method == 'POST':
            return True
        user = getattr(request, 'user', None)
        return bool(user and user.is_authenticated)
