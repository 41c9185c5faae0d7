import pytest
from django.urls import reverse

from records.models import Posting

pytestmark = pytest.mark.django_db


def posting(staff, **extra):
    body = {
        'mcr_number': staff.mcr_number,
        'school_name': 'NUS',
        'academic_year': '2024/2025',
        'posting_number': 1,
        'total_training_hour': 6,
        'rating': 4.5,
    }
    body.update(extra)
    return body


def test_create_posting(auth_client, staff):
    r = auth_client.post(reverse('create_posting'), posting(staff), format='json')
    assert r.status_code == 201
    assert r.data['posting']['posting_number'] == 1
    assert Posting.objects.get().staff_id == staff.mcr_number


def test_duplicate_posting_number_is_409(auth_client, staff):
    auth_client.post(reverse('create_posting'), posting(staff), format='json')
    r = auth_client.post(reverse('create_posting'), posting(staff, rating=3), format='json')
    assert r.status_code == 409
    assert r.data['error']['code'] == 'conflict'
    assert Posting.objects.count() == 1


def test_same_number_in_another_year_is_allowed(auth_client, staff):
    auth_client.post(reverse('create_posting'), posting(staff), format='json')
    r = auth_client.post(reverse('create_posting'), posting(staff, academic_year='2025/2026'), format='json')
    assert r.status_code == 201


def test_create_for_unknown_staff_is_404(auth_client, staff):
    r = auth_client.post(reverse('create_posting'), posting(staff, mcr_number='NOPE'), format='json')
    assert r.status_code == 404


def test_create_missing_rating_is_400(auth_client, staff):
    body = posting(staff)
    del body['rating']
    assert auth_client.post(reverse('create_posting'), body, format='json').status_code == 400


def test_check_posting(auth_client, staff):
    params = {k: v for k, v in posting(staff).items() if k in ('mcr_number', 'school_name', 'academic_year',
                                                              'posting_number')}
    assert auth_client.get(reverse('check_posting'), params).status_code == 404
    auth_client.post(reverse('create_posting'), posting(staff), format='json')
    r = auth_client.get(reverse('check_posting'), params)
    assert r.status_code == 200
    assert r.data == {'ok': True, 'exists': True}


def test_check_posting_requires_all_params(auth_client, staff):
    r = auth_client.get(reverse('check_posting'), {'mcr_number': staff.mcr_number})
    assert r.status_code == 400
