import pytest
from django.urls import reverse

from records.models import Contract

pytestmark = pytest.mark.django_db

CONTRACT = {
    'school_name': 'NUS',
    'start_date': '2024-01-01',
    'end_date': '2024-12-31',
    'status': 'active',
}


def url(mcr):
    return reverse('contracts', args=[mcr])


def test_create_and_list_in_start_date_order(auth_client, staff):
    later = dict(CONTRACT, start_date='2025-01-01', end_date='2025-12-31', training_hours_2024=3)
    assert auth_client.post(url(staff.mcr_number), later, format='json').status_code == 201
    r = auth_client.post(url(staff.mcr_number), dict(CONTRACT, training_hours=2.5, training_hours_2023=''),
                         format='json')
    assert r.status_code == 201
    assert r.data['contract']['total_training_hours'] == 2.5
    r = auth_client.get(url(staff.mcr_number))
    assert r.status_code == 200
    assert [c['start_date'] for c in r.data] == ['2024-01-01', '2025-01-01']
    assert r.data[1]['total_training_hours'] == 3


def test_create_accepts_contract_date_aliases(auth_client, staff):
    body = {'school_name': 'NTU', 'status': 'active',
            'contract_start_date': '2024-02-01T00:00:00.000Z', 'contract_end_date': '2025-01-31'}
    assert auth_client.post(url(staff.mcr_number), body, format='json').status_code == 201
    assert Contract.objects.get().start_date.isoformat() == '2024-02-01'


def test_create_missing_field_is_400(auth_client, staff):
    body = {k: v for k, v in CONTRACT.items() if k != 'status'}
    r = auth_client.post(url(staff.mcr_number), body, format='json')
    assert r.status_code == 400
    assert not Contract.objects.exists()


def test_create_for_unknown_staff_is_404(auth_client):
    assert auth_client.post(url('NOPE'), CONTRACT, format='json').status_code == 404


def test_empty_list_is_404(auth_client, staff):
    r = auth_client.get(url(staff.mcr_number))
    assert r.status_code == 404
    assert r.data['error']['code'] == 'not_found'


def test_latest_contract_for_school(auth_client, staff):
    Contract.objects.create(staff=staff, school_name='NUS', start_date='2023-01-01', end_date='2023-12-31',
                            status='inactive')
    Contract.objects.create(staff=staff, school_name='NUS', start_date='2024-01-01', end_date='2024-12-31',
                            status='active')
    r = auth_client.get(reverse('contract_for_school', args=[staff.mcr_number, 'NUS']))
    assert r.status_code == 200
    assert r.data['status'] == 'active'
    assert r.data['contract_start_date'] == '2024-01-01'
    assert r.data['contract_end_date'] == '2024-12-31'
    r = auth_client.get(reverse('contract_for_school', args=[staff.mcr_number, 'NTU']))
    assert r.status_code == 404


def test_delete_by_natural_key_from_query(auth_client, staff):
    Contract.objects.create(staff=staff, **CONTRACT)
    Contract.objects.create(staff=staff, **dict(CONTRACT, status='inactive'))
    r = auth_client.delete(url(staff.mcr_number) + '?school_name=NUS&status=active&start_date=2024-01-01')
    assert r.status_code == 200
    assert r.data['deleted'] == 1
    assert list(Contract.objects.values_list('status', flat=True)) == ['inactive']


def test_delete_by_natural_key_from_body(auth_client, staff):
    Contract.objects.create(staff=staff, **CONTRACT)
    body = {'school_name': 'NUS', 'status': 'active', 'start_date': '2024-01-01'}
    r = auth_client.delete(url(staff.mcr_number), body, format='json')
    assert r.status_code == 200
    assert not Contract.objects.exists()


def test_delete_without_match_is_404(auth_client, staff):
    Contract.objects.create(staff=staff, **CONTRACT)
    r = auth_client.delete(url(staff.mcr_number) + '?school_name=NUS&status=expired&start_date=2024-01-01')
    assert r.status_code == 404
    assert Contract.objects.count() == 1


def test_delete_with_incomplete_key_is_400(auth_client, staff):
    r = auth_client.delete(url(staff.mcr_number) + '?school_name=NUS')
    assert r.status_code == 400


def test_prefilled_contract_can_be_posted_back(auth_client, staff):
    Contract.objects.create(staff=staff, **CONTRACT)
    prefill = auth_client.get(reverse('contract_for_school', args=[staff.mcr_number, 'NUS'])).data
    body = {k: v for k, v in prefill.items() if k not in ('start_date', 'end_date')}
    body.update(contract_start_date='2025-01-01', contract_end_date='2025-12-31')
    r = auth_client.post(url(staff.mcr_number), body, format='json')
    assert r.status_code == 201
    assert r.data['contract']['start_date'] == '2025-01-01'
