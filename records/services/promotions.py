import logging
from datetime import date
from typing import List, Optional

from rest_framework.exceptions import NotFound

from records.models import Promotion, StaffRecord

logger = logging.getLogger(__name__)


def list_promotions(mcr_number: str) -> List[Promotion]:
    promotions = list(Promotion.objects.filter(staff_id=mcr_number).order_by('promotion_date', 'id'))
    if not promotions:
        raise NotFound('No promotions found for this MCR number')
    return promotions


def create_promotion(mcr_number: str, fields: dict, *, acting: str) -> Promotion:
    staff = StaffRecord.objects.filter(mcr_number=mcr_number).first()
    if staff is None:
        raise NotFound('Staff not found')
    promotion = Promotion.objects.create(staff=staff, **fields)
    logger.info('promotion %s for %s added by %s', promotion.id, mcr_number, acting)
    return promotion


def delete_promotions(mcr_number: str, *, new_title: str, promotion_date: Optional[date] = None,
                      acting: str) -> int:
    """Remove every promotion matching the key; returns how many went."""
    qs = Promotion.objects.filter(staff_id=mcr_number, new_title=new_title)
    if promotion_date is not None:
        qs = qs.filter(promotion_date=promotion_date)
    count, _ = qs.delete()
    if not count:
        raise NotFound('Promotion not found')
    logger.info('%d promotion(s) of %s to %s deleted by %s', count, mcr_number, new_title, acting)
    return count
