"""
Reusable field validators for the clinic serializers.
"""
from __future__ import annotations

import html

import bleach
from rest_framework import serializers


def clean_text(value, min_length: int | None = None):
    """Strip surrounding whitespace and any HTML markup from free text.

    Entities bleach produces for the text it keeps are decoded again, so
    plain text is stored as typed.  ``min_length`` is checked on the
    cleaned value.
    """
    if value is None:
        return value
    cleaned = html.unescape(bleach.clean(str(value), tags=[], strip=True)).strip()
    if min_length is not None and len(cleaned) < min_length:
        raise serializers.ValidationError(
            f'Ensure this field has at least {min_length} characters.', code='min_length',
        )
    return cleaned


class DigitCountValidator:
    """Bound the number of digits of an integer (sign excluded)."""

    def __init__(self, min_digits: int, max_digits: int):
        self.min_digits = min_digits
        self.max_digits = max_digits

    def __call__(self, value):
        digits = len(str(abs(int(value))))
        if digits < self.min_digits or digits > self.max_digits:
            if self.min_digits == self.max_digits:
                expected = f'{self.min_digits}'
            else:
                expected = f'between {self.min_digits} and {self.max_digits}'
            raise serializers.ValidationError(f'Must have {expected} digits.', code='digits')


class ExistsValidator:
    """Reject ids that do not match a row of ``queryset``.

    The queryset is re-evaluated on every call, so managers that hide
    soft-deleted rows make those rows count as missing.
    """

    message = 'The selected {field_name} is invalid.'

    def __init__(self, queryset, field_name: str = 'pk', label: str | None = None):
        self.queryset = queryset
        self.field_name = field_name
        self.label = label

    def __call__(self, value):
        if not self.queryset.all().filter(**{self.field_name: value}).exists():
            label = self.label or self.queryset.model._meta.model_name
            raise serializers.ValidationError(self.message.format(field_name=label), code='exists')
