"""
Binding of request input to serializers.

``bind_input`` is the single construction step every write handler goes
through: it chooses full or partial validation from the HTTP verb and
raises ``ValidationError`` (HTTP 422) before any handler logic runs.
``save_resolved`` persists the data the write resolver produced.
"""
from __future__ import annotations

from typing import Any, Mapping, Optional, Type

from rest_framework import serializers


def bind_input(serializer_class: Type[serializers.Serializer], request, instance=None, data: Optional[Mapping[str, Any]] = None):
    """Validate ``request.data`` with ``serializer_class`` for the request's verb.

    POST and PUT need the full shape of the resource; PATCH makes every
    field optional while keeping the format and reference checks.
    """
    serializer = serializer_class(
        instance,
        data=request.data if data is None else data,
        partial=request.method == 'PATCH',
        context={'request': request},
    )
    serializer.is_valid(raise_exception=True)
    return serializer


def save_resolved(serializer: serializers.ModelSerializer, data: Mapping[str, Any]):
    """Create or update ``serializer``'s instance from resolved ``data``.

    Unlike ``serializer.save(**kwargs)`` this lets the resolver remove
    keys as well as override them.
    """
    data = dict(data)
    if serializer.instance is None:
        serializer.instance = serializer.create(data)
    else:
        serializer.instance = serializer.update(serializer.instance, data)
    return serializer.instance
