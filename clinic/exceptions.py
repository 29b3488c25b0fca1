"""
Unified API exception handler.

Every error leaves the API as ``{"message": ...}``; validation errors
additionally carry ``errors`` (field name to list of messages) and use
HTTP 422.  Database integrity errors (a uniqueness race lost to a
concurrent insert) are reported the same way as validation errors.
"""
import logging

from django.db import IntegrityError
from rest_framework import exceptions, status
from rest_framework.response import Response
from rest_framework.views import exception_handler as drf_exception_handler, set_rollback

logger = logging.getLogger(__name__)

NON_FIELD_KEY = 'non_field_errors'


def flatten_errors(detail) -> dict:
    """Turn DRF error detail into ``{field: [message, ...]}``."""
    if isinstance(detail, dict):
        errors = {}
        for field, messages in detail.items():
            if isinstance(messages, dict):
                for sub, sub_messages in flatten_errors(messages).items():
                    errors[f'{field}.{sub}'] = sub_messages
            elif isinstance(messages, (list, tuple)):
                errors[field] = [str(m) for m in messages]
            else:
                errors[field] = [str(messages)]
        return errors
    if isinstance(detail, (list, tuple)):
        return {NON_FIELD_KEY: [str(m) for m in detail]}
    return {NON_FIELD_KEY: [str(detail)]}


def summarize_errors(errors: dict) -> str:
    """First violation prefixed by its field, plus how many others there are."""
    messages = [(field, m) for field, ms in errors.items() for m in ms]
    if not messages:
        return 'The given data was invalid.'
    field, first = messages[0]
    summary = first if field == NON_FIELD_KEY else f'{field}: {first}'
    remaining = len(messages) - 1
    if remaining:
        summary += f" (and {remaining} more error{'s' if remaining > 1 else ''})"
    return summary


def validation_response(errors: dict) -> Response:
    return Response(
        {'message': summarize_errors(errors), 'errors': errors},
        status=status.HTTP_422_UNPROCESSABLE_ENTITY,
    )


def api_exception_handler(exc, context):
    if isinstance(exc, IntegrityError):
        set_rollback()
        logger.warning('integrity error in %s: %s', context.get('view'), exc)
        return validation_response({NON_FIELD_KEY: ['The data conflicts with an existing record.']})

    if isinstance(exc, exceptions.ValidationError):
        set_rollback()
        return validation_response(flatten_errors(exc.detail))

    resp = drf_exception_handler(exc, context)
    if resp is None:
        logger.error('unhandled error in %s', context.get('view'), exc_info=exc)
        return Response({'message': 'Server Error'}, status=status.HTTP_500_INTERNAL_SERVER_ERROR)

    if isinstance(resp.data, dict) and 'detail' in resp.data:
        message = str(resp.data['detail'])
    else:
        message = str(resp.data)
    resp.data = {'message': message}
    return resp
