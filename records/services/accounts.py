import logging
from typing import Tuple

from django.db import IntegrityError, transaction
from rest_framework.exceptions import NotFound, PermissionDenied

from records.errors import InvalidCredentials, StoreError
from records.models import UserAccount
from records.tokens import issue_token

logger = logging.getLogger(__name__)


def authenticate(identifier: str, password: str, claimed_role: str) -> Tuple[str, str]:
    """Return ``(token, role)`` for valid credentials.

    The order of checks is fixed: unknown identifier (404), wrong
    password (401), then role mismatch (403).
    """
    account = UserAccount.objects.filter(mcr_number=identifier).first()
    if account is None:
        logger.info('login failed for %s: unknown user', identifier)
        raise NotFound('User not found')
    if not account.check_password(password):
        logger.info('login failed for %s: incorrect password', identifier)
        raise InvalidCredentials()
    if account.role != claimed_role:
        logger.info('login failed for %s: role %s does not match', identifier, claimed_role)
        raise PermissionDenied('Role does not match')
    logger.info('login ok for %s (%s)', identifier, account.role)
    return issue_token(account), account.role


def register(*, identifier: str, email: str, password: str, role: str) -> UserAccount:
    account = UserAccount(mcr_number=identifier, email=email, role=role)
    account.set_password(password)
    try:
        with transaction.atomic():
            account.save(force_insert=True)
    except IntegrityError as exc:
        logger.warning('registration of %s rejected by the store: %s', identifier, exc)
        raise StoreError() from exc
    logger.info('registered %s as %s', identifier, role)
    return account
