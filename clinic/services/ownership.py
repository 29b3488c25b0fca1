"""
Write resolution for owner and role fields.

Runs after validation and after the access policy allowed the write,
and decides the final ``user_id`` (and role flags) that get persisted.
Everything here is pure: the input mapping is never mutated and the
same inputs always give the same result.
"""
from __future__ import annotations

import enum
from typing import Any, Dict, Mapping, Optional

from clinic.permissions import Actor, is_superuser

ROLE_FLAGS = ('is_staff', 'is_superuser')


class WriteVerb(enum.Enum):
    CREATE = 'POST'
    REPLACE = 'PUT'
    PATCH = 'PATCH'

    @classmethod
    def from_method(cls, method: str) -> "WriteVerb":
        return cls((method or '').upper())


def resolve_owner(actor: Actor, verb: WriteVerb, data: Mapping[str, Any], field: str = 'user_id') -> Dict[str, Any]:
    """Return a copy of ``data`` with the owner field resolved.

    * owner omitted (or null): a superuser's PATCH keeps the stored
      owner; every other write is assigned to the actor.
    * owner given by a non-superuser: replaced with the actor's id.
    * owner given by a superuser: kept as submitted.
    """
    resolved = dict(data)
    submitted = resolved.get(field)

    if submitted is None:
        if verb is WriteVerb.PATCH and is_superuser(actor):
            resolved.pop(field, None)
        else:
            resolved[field] = actor.id
    elif not is_superuser(actor):
        resolved[field] = actor.id

    return resolved


def resolve_role_flags(actor: Optional[Actor], data: Mapping[str, Any]) -> Dict[str, Any]:
    """Drop ``is_staff``/``is_superuser`` unless a superuser sent them.

    ``actor`` is ``None`` for an anonymous signup.
    """
    resolved = dict(data)
    if actor is None or not is_superuser(actor):
        for flag in ROLE_FLAGS:
            resolved.pop(flag, None)
    return resolved
