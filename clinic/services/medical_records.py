"""
Medical record creation and access-code notification.

A record gets a random 60 character access code when it is created.
The owner receives the code by e-mail once the creating transaction has
committed; sending happens on a daemon thread by default so the API
response never waits for the mail server, and a failed send is logged
rather than propagated.
"""
from __future__ import annotations

import logging
import threading
from typing import Any, Dict

from django.conf import settings
from django.core.mail import send_mail
from django.db import transaction
from django.utils.crypto import get_random_string

from clinic.models import MedicalRecord

logger = logging.getLogger(__name__)

ACCESS_CODE_LENGTH = 60
ACCESS_CODE_CHARS = 'abcdefghijklmnopqrstuvwxyzABCDEFGHIJKLMNOPQRSTUVWXYZ0123456789'


def generate_access_code() -> str:
    while True:
        code = get_random_string(ACCESS_CODE_LENGTH, ACCESS_CODE_CHARS)
        if not MedicalRecord.objects.filter(access_code=code).exists():
            return code


def create_medical_record(validated_data: Dict[str, Any]) -> MedicalRecord:
    with transaction.atomic():
        record = MedicalRecord.objects.create(access_code=generate_access_code(), **validated_data)
        if getattr(settings, 'MEDICAL_RECORD_NOTIFY', True):
            transaction.on_commit(lambda: dispatch_notification(record.pk))
    logger.info('medical record %s created for pet %s', record.pk, record.pet_id)
    return record


def dispatch_notification(record_id: int) -> None:
    if getattr(settings, 'MEDICAL_RECORD_NOTIFY_ASYNC', True):
        worker = threading.Thread(
            target=notify_access_code,
            args=(record_id,),
            name=f'medical-record-notify-{record_id}',
            daemon=True,
        )
        worker.start()
    else:
        notify_access_code(record_id)


def notify_access_code(record_id: int) -> bool:
    """E-mail the access code of a record to the pet's owner."""
    try:
        record = MedicalRecord.objects.select_related('user', 'pet').get(pk=record_id)
        owner = record.user
        if not owner.email:
            logger.warning('medical record %s: owner %s has no e-mail, skipping notification', record.pk, owner.pk)
            return False
        name = owner.get_full_name() or owner.email
        body = (
            f'Hello {name},\n\n'
            f'A new medical record was written for {record.pet.name}.\n'
            f'Use the access code below to read it:\n\n'
            f'{record.access_code}\n'
        )
        send_mail(
            subject='Medical record available',
            message=body,
            from_email=settings.DEFAULT_FROM_EMAIL,
            recipient_list=[owner.email],
            fail_silently=False,
        )
    except Exception:
        logger.exception('medical record %s: access code notification failed', record_id)
        return False
    logger.info('medical record %s: access code sent to %s', record_id, owner.email)
    return True
