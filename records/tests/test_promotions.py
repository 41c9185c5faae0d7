import pytest
from django.urls import reverse

from records.models import Promotion

pytestmark = pytest.mark.django_db


def url(mcr):
    return reverse('promotions', args=[mcr])


def promote(staff, new_title, when):
    return Promotion.objects.create(staff=staff, previous_title='Consultant', new_title=new_title,
                                    promotion_date=when)


def test_create_and_list_by_date(auth_client, staff):
    body = {'previous_title': 'Consultant', 'new_title': 'Senior Consultant', 'promotion_date': '2024-06-01'}
    r = auth_client.post(url(staff.mcr_number), body, format='json')
    assert r.status_code == 201
    promote(staff, 'Associate Consultant', '2020-01-01')
    r = auth_client.get(url(staff.mcr_number))
    assert r.status_code == 200
    assert [p['new_title'] for p in r.data] == ['Associate Consultant', 'Senior Consultant']


def test_create_missing_date_is_400(auth_client, staff):
    r = auth_client.post(url(staff.mcr_number), {'previous_title': 'a', 'new_title': 'b'}, format='json')
    assert r.status_code == 400


def test_create_for_unknown_staff_is_404(auth_client):
    body = {'previous_title': 'a', 'new_title': 'b', 'promotion_date': '2024-01-01'}
    assert auth_client.post(url('NOPE'), body, format='json').status_code == 404


def test_empty_list_is_404(auth_client, staff):
    assert auth_client.get(url(staff.mcr_number)).status_code == 404


def test_delete_removes_every_match_and_reports_count(auth_client, staff):
    promote(staff, 'Senior Consultant', '2023-01-01')
    promote(staff, 'Senior Consultant', '2024-01-01')
    promote(staff, 'Head', '2025-01-01')
    r = auth_client.delete(url(staff.mcr_number) + '?new_title=Senior%20Consultant')
    assert r.status_code == 200
    assert r.data['deleted'] == 2
    assert list(Promotion.objects.values_list('new_title', flat=True)) == ['Head']


def test_delete_narrowed_by_date(auth_client, staff):
    promote(staff, 'Senior Consultant', '2023-01-01')
    promote(staff, 'Senior Consultant', '2024-01-01')
    r = auth_client.delete(url(staff.mcr_number), {'new_title': 'Senior Consultant',
                                                   'promotion_date': '2024-01-01'}, format='json')
    assert r.data['deleted'] == 1
    assert Promotion.objects.get().promotion_date.isoformat() == '2023-01-01'


def test_delete_without_match_is_404(auth_client, staff):
    r = auth_client.delete(url(staff.mcr_number) + '?new_title=Nothing')
    assert r.status_code == 404
