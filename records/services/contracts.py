import logging
from datetime import date
from typing import List

from rest_framework.exceptions import NotFound

from records.models import Contract, StaffRecord

logger = logging.getLogger(__name__)


def _staff_or_404(mcr_number: str) -> StaffRecord:
    staff = StaffRecord.objects.filter(mcr_number=mcr_number).first()
    if staff is None:
        raise NotFound('Staff not found')
    return staff


def list_contracts(mcr_number: str) -> List[Contract]:
    contracts = list(Contract.objects.filter(staff_id=mcr_number).order_by('start_date', 'id'))
    if not contracts:
        raise NotFound('No contracts found for this MCR number')
    return contracts


def latest_contract_for_school(mcr_number: str, school_name: str) -> Contract:
    contract = (
        Contract.objects.filter(staff_id=mcr_number, school_name=school_name)
        .order_by('-start_date', '-id')
        .first()
    )
    if contract is None:
        raise NotFound('No contract found for this school')
    return contract


def create_contract(mcr_number: str, fields: dict, *, acting: str) -> Contract:
    staff = _staff_or_404(mcr_number)
    contract = Contract.objects.create(staff=staff, **fields)
    logger.info('contract %s for %s at %s added by %s', contract.id, mcr_number, contract.school_name, acting)
    return contract


def delete_contract(mcr_number: str, *, school_name: str, status: str, start_date: date, acting: str) -> int:
    count, _ = Contract.objects.filter(
        staff_id=mcr_number, school_name=school_name, status=status, start_date=start_date
    ).delete()
    if not count:
        raise NotFound('Contract not found')
    logger.info('%d contract(s) of %s at %s deleted by %s', count, mcr_number, school_name, acting)
    return count
