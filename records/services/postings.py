import logging

from django.db import IntegrityError, transaction
from rest_framework.exceptions import NotFound

from records.errors import Conflict
from records.models import Posting, StaffRecord

logger = logging.getLogger(__name__)


def posting_exists(*, mcr_number: str, school_name: str, academic_year: str, posting_number: int) -> bool:
    return Posting.objects.filter(
        staff_id=mcr_number,
        school_name=school_name,
        academic_year=academic_year,
        posting_number=posting_number,
    ).exists()


def create_posting(fields: dict, *, acting: str) -> Posting:
    fields = dict(fields)
    mcr_number = fields.pop('mcr_number')
    staff = StaffRecord.objects.filter(mcr_number=mcr_number).first()
    if staff is None:
        raise NotFound('Staff not found')
    posting = Posting(staff=staff, **fields)
    try:
        with transaction.atomic():
            posting.save(force_insert=True)
    except IntegrityError as exc:
        raise Conflict('Posting number already exists for this school and academic year') from exc
    logger.info('posting %s #%s for %s added by %s', posting.school_name, posting.posting_number, mcr_number, acting)
    return posting
