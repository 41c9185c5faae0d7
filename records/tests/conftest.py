import pytest
from django.core.cache import cache
from rest_framework.test import APIClient

from records.models import StaffRecord, UserAccount
from records.tokens import issue_token


@pytest.fixture(autouse=True)
def _clear_throttle_cache():
    cache.clear()
    yield
    cache.clear()


@pytest.fixture
def client():
    return APIClient()


@pytest.fixture
def account(db):
    u = UserAccount(mcr_number='M12345A', email='hr@example.com', role='hr')
    u.set_password('P@ssw0rd1')
    u.save()
    return u


@pytest.fixture
def token(account):
    return issue_token(account)


@pytest.fixture
def auth_client(token):
    c = APIClient()
    c.credentials(HTTP_AUTHORIZATION=f'Bearer {token}')
    return c


@pytest.fixture
def staff(db):
    return StaffRecord.objects.create(
        mcr_number='D10001B',
        first_name='Jane',
        last_name='Tan',
        department='Surgery',
        appointment='Consultant',
        email='jane@example.com',
        created_by='seed',
    )
