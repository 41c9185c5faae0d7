"""
Staff record operations.

Every mutation is a single statement against ``main_data``: updates and
the soft delete/restore pair are conditional ``UPDATE``s whose row count
decides between success and ``NotFound``.
"""
import logging
from typing import List

from django.db import IntegrityError, transaction
from django.utils import timezone
from rest_framework.exceptions import NotFound

from records.errors import StoreError
from records.models import StaffRecord

logger = logging.getLogger(__name__)

NOT_FOUND = 'Staff not found'


def list_staff() -> List[StaffRecord]:
    """All staff rows, soft-deleted ones included."""
    return list(StaffRecord.objects.order_by('mcr_number'))


def get_staff(mcr_number: str) -> StaffRecord:
    staff = StaffRecord.objects.filter(mcr_number=mcr_number).first()
    if staff is None:
        raise NotFound(NOT_FOUND)
    return staff


def create_staff(fields: dict, *, acting: str) -> StaffRecord:
    staff = StaffRecord(created_by=acting, **fields)
    try:
        with transaction.atomic():
            staff.save(force_insert=True)
    except IntegrityError as exc:
        logger.warning('insert of staff %s rejected: %s', fields.get('mcr_number'), exc)
        raise StoreError('Failed to add new staff details') from exc
    logger.info('staff %s created by %s', staff.mcr_number, acting)
    return staff


def update_staff(mcr_number: str, fields: dict, *, acting: str) -> None:
    """Overwrite the mutable columns; last write wins."""
    count = StaffRecord.objects.filter(mcr_number=mcr_number).update(
        updated_by=acting, updated_at=timezone.now(), **fields
    )
    if not count:
        raise NotFound(NOT_FOUND)
    logger.info('staff %s updated by %s', mcr_number, acting)


def soft_delete_staff(mcr_number: str, *, acting: str) -> None:
    count = StaffRecord.objects.filter(mcr_number=mcr_number, deleted=False).update(
        deleted=True, deleted_by=acting, deleted_at=timezone.now()
    )
    if not count:
        raise NotFound('Staff not found or already deleted')
    logger.info('staff %s deleted by %s', mcr_number, acting)


def restore_staff(mcr_number: str, *, acting: str) -> None:
    # Only rows currently marked deleted qualify; restoring a live row is a 404
    count = StaffRecord.objects.filter(mcr_number=mcr_number, deleted=True).update(
        deleted=False, deleted_by=None, deleted_at=None
    )
    if not count:
        raise NotFound('Staff not found or not deleted')
    logger.info('staff %s restored by %s', mcr_number, acting)
