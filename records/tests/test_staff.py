import pytest
from django.urls import reverse

from records.models import StaffRecord

pytestmark = pytest.mark.django_db

NEW_STAFF = {
    'mcr_number': 'M123',
    'first_name': 'Jane',
    'last_name': 'Lim',
    'department': 'Paediatrics',
    'appointment': 'Associate Consultant',
    'email': 'j@x.com',
}


def test_create_then_get_stamps_creator(auth_client):
    r = auth_client.post(reverse('create_entry'), NEW_STAFF, format='json')
    assert r.status_code == 201
    assert r.data['mcr_number'] == 'M123'
    r = auth_client.get(reverse('staff_detail', args=['M123']))
    assert r.status_code == 200
    assert r.data['created_by'] == 'M12345A'
    assert r.data['deleted'] is False
    assert r.data['start_date'] is None


@pytest.mark.parametrize('field', ['mcr_number', 'first_name', 'last_name', 'department', 'appointment', 'email'])
def test_create_with_missing_required_field_inserts_nothing(auth_client, field):
    body = dict(NEW_STAFF, **{field: ''})
    r = auth_client.post(reverse('create_entry'), body, format='json')
    assert r.status_code == 400
    assert r.data['error']['message'] == 'Please provide all required fields'
    assert not StaffRecord.objects.exists()


def test_create_rejects_unknown_fields(auth_client):
    r = auth_client.post(reverse('create_entry'), dict(NEW_STAFF, salary=1), format='json')
    assert r.status_code == 400
    assert r.data['error']['message'] == {'salary': ['Unknown field.']}


def test_create_strips_markup_from_names(auth_client):
    body = dict(NEW_STAFF, first_name='<script>x</script>Jane')
    assert auth_client.post(reverse('create_entry'), body, format='json').status_code == 201
    assert StaffRecord.objects.get(pk='M123').first_name == 'xJane'


def test_create_accepts_iso_datetimes_and_blank_optionals(auth_client):
    body = dict(
        NEW_STAFF,
        start_date='2024-01-31T16:00:00.000Z',
        end_date='',
        teaching_training_hours='',
        created_by='someone-else',
    )
    r = auth_client.post(reverse('create_entry'), body, format='json')
    assert r.status_code == 201
    s = StaffRecord.objects.get(pk='M123')
    assert s.start_date.isoformat() == '2024-02-01'
    assert s.end_date is None
    assert s.teaching_training_hours is None
    assert s.created_by == 'M12345A'


@pytest.mark.parametrize('value, expected', [
    ('2024-01-31T15:59:59Z', '2024-01-31'),
    ('2024-01-31T16:00:00+00:00', '2024-02-01'),
    ('2024-01-31T23:30:00', '2024-01-31'),
])
def test_datetimes_are_stored_as_the_local_day(auth_client, value, expected):
    r = auth_client.post(reverse('create_entry'), dict(NEW_STAFF, renewal_start_date=value), format='json')
    assert r.status_code == 201
    assert StaffRecord.objects.get(pk='M123').renewal_start_date.isoformat() == expected


def test_malformed_datetime_is_400(auth_client):
    r = auth_client.post(reverse('create_entry'), dict(NEW_STAFF, start_date='2024-13-01T00:00:00Z'), format='json')
    assert r.status_code == 400
    assert not StaffRecord.objects.exists()


def test_create_duplicate_key_is_500(auth_client, staff):
    body = dict(NEW_STAFF, mcr_number=staff.mcr_number)
    r = auth_client.post(reverse('create_entry'), body, format='json')
    assert r.status_code == 500
    assert r.data['error']['message'] == 'Failed to add new staff details'


def test_get_unknown_staff_is_404(auth_client):
    r = auth_client.get(reverse('staff_detail', args=['NOPE']))
    assert r.status_code == 404
    assert r.data['error']['message'] == 'Staff not found'


def test_update_overwrites_and_stamps_updater(auth_client, staff):
    body = {k: v for k, v in NEW_STAFF.items() if k != 'mcr_number'}
    r = auth_client.put(reverse('staff_detail', args=[staff.mcr_number]), body, format='json')
    assert r.status_code == 200
    staff.refresh_from_db()
    assert staff.last_name == 'Lim'
    assert staff.updated_by == 'M12345A'
    assert staff.updated_at is not None


def test_update_ignores_echoed_key_and_audit_columns(auth_client, staff):
    r = auth_client.get(reverse('staff_detail', args=[staff.mcr_number]))
    body = dict(r.data, first_name='Janet', deleted=True)
    r = auth_client.put(reverse('staff_detail', args=[staff.mcr_number]), body, format='json')
    assert r.status_code == 200
    staff.refresh_from_db()
    assert staff.first_name == 'Janet'
    assert staff.deleted is False


def test_update_unknown_staff_is_404(auth_client):
    body = {k: v for k, v in NEW_STAFF.items() if k != 'mcr_number'}
    r = auth_client.put(reverse('staff_detail', args=['NOPE']), body, format='json')
    assert r.status_code == 404


def test_update_rejects_end_before_start(auth_client, staff):
    body = {k: v for k, v in NEW_STAFF.items() if k != 'mcr_number'}
    body.update(start_date='2024-05-01', end_date='2024-01-01')
    r = auth_client.put(reverse('staff_detail', args=[staff.mcr_number]), body, format='json')
    assert r.status_code == 400


def test_soft_delete_keeps_row_and_records_who(auth_client, staff):
    r = auth_client.delete(reverse('staff_detail', args=[staff.mcr_number]))
    assert r.status_code == 200
    staff.refresh_from_db()
    assert staff.deleted is True
    assert staff.deleted_by == 'M12345A'
    assert staff.deleted_at is not None
    listed = auth_client.get(reverse('database')).data
    assert [s['mcr_number'] for s in listed] == [staff.mcr_number]
    assert listed[0]['deleted'] is True


def test_soft_delete_twice_is_404(auth_client, staff):
    auth_client.delete(reverse('staff_detail', args=[staff.mcr_number]))
    r = auth_client.delete(reverse('staff_detail', args=[staff.mcr_number]))
    assert r.status_code == 404


def test_delete_then_restore_returns_record_to_its_prior_state(auth_client, staff):
    detail = reverse('staff_detail', args=[staff.mcr_number])
    before = auth_client.get(detail).data
    assert auth_client.delete(detail).status_code == 200
    assert auth_client.get(detail).data['deleted'] is True
    r = auth_client.put(reverse('restore', args=[staff.mcr_number]))
    assert r.status_code == 200
    after = auth_client.get(detail).data
    assert after == before
    assert (after['deleted'], after['deleted_by'], after['deleted_at']) == (False, None, None)


def test_restore_of_live_record_is_404(auth_client, staff):
    r = auth_client.put(reverse('restore', args=[staff.mcr_number]))
    assert r.status_code == 404
    staff.refresh_from_db()
    assert staff.deleted is False


def test_restore_unknown_is_404(auth_client):
    assert auth_client.put(reverse('restore', args=['NOPE'])).status_code == 404


def test_lists_are_ordered_by_key(auth_client, staff):
    StaffRecord.objects.create(
        mcr_number='A00001', first_name='A', last_name='B', department='C', appointment='D', email='a@b.com',
    )
    r = auth_client.get(reverse('main_data'))
    assert [s['mcr_number'] for s in r.data] == ['A00001', staff.mcr_number]


def test_main_data_requires_token_by_default(client, staff):
    assert client.get(reverse('main_data')).status_code == 403


def test_main_data_can_be_opened(client, staff, settings):
    settings.STAFF_LIST_PUBLIC = True
    assert client.get(reverse('main_data')).status_code == 200
    assert client.get(reverse('database')).status_code == 403
