import pytest

from hospital_dashboard.exceptions import DuplicateId, DuplicateUsername, InvalidFormat, NotFound
from hospital_dashboard.models import Patient, Appointment, User
from hospital_dashboard.services.repositories import (
    UserRepository,
    PatientRepository,
    AppointmentRepository,
)
from hospital_dashboard.services.store import USERS_KEY, PATIENTS_KEY, APPOINTMENTS_KEY, APPOINTMENT_SEQ_KEY
from tests.factories import make_patient, make_appointment


class FixedClock:
    def __init__(self, value):
        self.value = value

    def __call__(self):
        return self.value


# --- users ---

def test_register_derives_full_name(store):
    user = UserRepository(store).register('jane.doe', 'secret', 'Doctor')
    assert user.full_name == 'Jane Doe'
    assert store.get(USERS_KEY) == [
        {'username': 'jane.doe', 'password': 'secret', 'role': 'Doctor', 'fullName': 'Jane Doe'}
    ]


def test_register_capitalizes_every_segment(store):
    user = UserRepository(store).register('mary.ann.lee', 'secret', 'Nurse')
    assert user.full_name == 'Mary Ann Lee'


@pytest.mark.parametrize('username', ['janedoe', 'admin', '', 'jane.', '.doe'])
def test_register_rejects_usernames_without_two_parts(store, users, username):
    before = store.raw(USERS_KEY)
    with pytest.raises(InvalidFormat):
        UserRepository(store).register(username, 'secret', 'Doctor')
    assert store.raw(USERS_KEY) == before


def test_register_rejects_taken_username(store, users):
    with pytest.raises(DuplicateUsername):
        UserRepository(store).register('emily.white', 'other', 'Nurse')
    assert len(store.get(USERS_KEY)) == 3


def test_register_rejects_unknown_role(store):
    with pytest.raises(InvalidFormat):
        UserRepository(store).register('jane.doe', 'secret', 'Janitor')
    assert store.get(USERS_KEY) == []


def test_find_by_credentials_needs_exact_match(store, users):
    repo = UserRepository(store)
    assert repo.find_by_credentials('admin', 'admin123').role == 'Administrator'
    assert repo.find_by_credentials('admin', 'ADMIN123') is None
    assert repo.find_by_credentials('nobody', 'admin123') is None


def test_update_profile_changes_name_and_password(store, users):
    repo = UserRepository(store)
    repo.update_profile('john.doe', 'Johnny Doe', 'newpass')
    user = repo.find('john.doe')
    assert user.full_name == 'Johnny Doe'
    assert user.password == 'newpass'


def test_update_profile_keeps_password_when_blank(store, users):
    repo = UserRepository(store)
    repo.update_profile('john.doe', 'Johnny Doe', '')
    assert repo.find('john.doe').password == 'password123'


# --- patients ---

def test_list_preserves_insertion_order(store, patients):
    ids = [p.id for p in PatientRepository(store).list()]
    assert ids == ['P-101', 'P-102', 'P-103', 'P-110']


def test_find_returns_record_or_none(store, patients):
    repo = PatientRepository(store)
    assert repo.find('P-102').name == 'Jane Smith'
    assert repo.find('P-999') is None


def test_create_appends_patient(store, patients):
    repo = PatientRepository(store)
    repo.create(Patient.from_dict(make_patient(id='P-200', name='New Person')))
    assert [p.id for p in repo.list()][-1] == 'P-200'


def test_create_with_colliding_id_is_rejected(store, patients):
    repo = PatientRepository(store)
    with pytest.raises(DuplicateId):
        repo.create(Patient.from_dict(make_patient(id='P-101')))
    assert repo.count() == 4


def test_create_validates_fields(store):
    repo = PatientRepository(store)
    with pytest.raises(InvalidFormat):
        repo.create(Patient.from_dict(make_patient(name='')))
    with pytest.raises(InvalidFormat):
        repo.create(Patient.from_dict(make_patient(status='Recovering')))
    with pytest.raises(InvalidFormat):
        repo.create(Patient.from_dict(make_patient(dob='15/03/1985')))
    assert store.get(PATIENTS_KEY) == []


def test_blood_type_is_optional(store):
    repo = PatientRepository(store)
    patient = repo.create(Patient.from_dict(make_patient(bloodType='')))
    assert patient.blood_type is None


def test_update_replaces_whole_record(store, patients):
    repo = PatientRepository(store)
    repo.update('P-103', Patient.from_dict(make_patient(id='P-103', name='Robert J.', status='Stable')))
    patient = repo.find('P-103')
    assert patient.name == 'Robert J.'
    assert patient.status == 'Stable'
    assert [p.id for p in repo.list()] == ['P-101', 'P-102', 'P-103', 'P-110']


def test_update_cannot_rename_id(store, patients):
    repo = PatientRepository(store)
    with pytest.raises(InvalidFormat):
        repo.update('P-103', Patient.from_dict(make_patient(id='P-999')))
    assert repo.find('P-103') is not None


def test_update_missing_patient(store, patients):
    with pytest.raises(NotFound):
        PatientRepository(store).update('P-999', Patient.from_dict(make_patient(id='P-999')))


def test_delete_removes_patient(store, patients):
    repo = PatientRepository(store)
    repo.delete('P-102')
    assert repo.find('P-102') is None
    assert repo.count() == 3


def test_delete_missing_patient_leaves_store_unchanged(store, patients):
    before = store.raw(PATIENTS_KEY)
    with pytest.raises(NotFound):
        PatientRepository(store).delete('P-999')
    assert store.raw(PATIENTS_KEY) == before


def test_unknown_fields_survive_a_rewrite(store):
    store.set(PATIENTS_KEY, [dict(make_patient(id='P-1'), ward='B2')])
    repo = PatientRepository(store)
    repo.create(Patient.from_dict(make_patient(id='P-2')))
    assert store.get(PATIENTS_KEY)[0]['ward'] == 'B2'


def test_missing_fields_are_defaulted_on_read(store):
    store.set(PATIENTS_KEY, [{'id': 'P-1', 'name': 'Partial'}, 'garbage'])
    patients = PatientRepository(store).list()
    assert len(patients) == 1
    assert patients[0].status == ''
    assert patients[0].blood_type is None


def test_non_list_collection_reads_as_empty(store):
    store.set(PATIENTS_KEY, {'id': 'P-1'})
    assert PatientRepository(store).list() == []


# --- appointments ---

def test_create_generates_time_based_id(store):
    repo = AppointmentRepository(store, clock=FixedClock(1718200000.123))
    appointment = repo.create(Appointment.from_dict(make_appointment()))
    assert appointment.id == 'A-1718200000123'
    assert store.get(APPOINTMENTS_KEY)[0]['id'] == 'A-1718200000123'


def test_ids_are_unique_within_the_same_millisecond(store):
    repo = AppointmentRepository(store, clock=FixedClock(1718200000.0))
    ids = {repo.create(Appointment.from_dict(make_appointment())).id for _ in range(3)}
    assert len(ids) == 3


def test_ids_skip_values_already_stored(store):
    store.set(APPOINTMENTS_KEY, [dict(make_appointment(), id='A-1000')])
    repo = AppointmentRepository(store, clock=FixedClock(1.0))
    assert repo.create(Appointment.from_dict(make_appointment())).id == 'A-1001'


def test_create_ignores_caller_supplied_id(store, appointments):
    repo = AppointmentRepository(store, clock=FixedClock(2000.0))
    appointment = repo.create(Appointment.from_dict(dict(make_appointment(), id='A-001')))
    assert appointment.id == 'A-2000000'
    assert repo.count() == 4


def test_create_validates_time(store):
    with pytest.raises(InvalidFormat):
        AppointmentRepository(store).create(Appointment.from_dict(make_appointment(time='25:00')))


def test_reschedule_with_time(store, appointments):
    repo = AppointmentRepository(store)
    repo.reschedule('A-001', '2025-06-18T09:45:00')
    appointment = repo.find('A-001')
    assert appointment.date == '2025-06-18'
    assert appointment.time == '09:45'


def test_reschedule_date_only_keeps_time(store, appointments):
    repo = AppointmentRepository(store)
    repo.reschedule('A-002', '2025-07-01')
    appointment = repo.find('A-002')
    assert appointment.date == '2025-07-01'
    assert appointment.time == '14:30'


def test_reschedule_missing_appointment(store, appointments):
    with pytest.raises(NotFound):
        AppointmentRepository(store).reschedule('A-999', '2025-07-01')


def test_delete_appointment(store, appointments):
    repo = AppointmentRepository(store)
    repo.delete('A-003')
    assert [a.id for a in repo.list()] == ['A-001', 'A-002']


def test_user_record_round_trips_through_store(store):
    UserRepository(store).create(User('amy.pond', 'pw', 'Nurse', 'Amy Pond'))
    assert UserRepository(store).find('amy.pond') == User('amy.pond', 'pw', 'Nurse', 'Amy Pond')


def test_colliding_id_is_reported_before_field_errors(store, patients):
    with pytest.raises(DuplicateId):
        PatientRepository(store).create(Patient.from_dict(make_patient(id='P-101', status='Unknown')))


def test_deleted_appointment_id_is_not_reissued(store):
    clock = FixedClock(5.0)
    first = AppointmentRepository(store, clock=clock).create(Appointment.from_dict(make_appointment()))
    AppointmentRepository(store, clock=clock).delete(first.id)
    second = AppointmentRepository(store, clock=clock).create(Appointment.from_dict(make_appointment()))
    assert first.id == 'A-5000'
    assert second.id == 'A-5001'


def test_new_ids_stay_above_stored_ids_when_clock_is_behind(store):
    store.set(APPOINTMENTS_KEY, [dict(make_appointment(), id='A-9000')])
    appointment = AppointmentRepository(store, clock=FixedClock(1.0)).create(Appointment.from_dict(make_appointment()))
    assert appointment.id == 'A-9001'


def test_id_sequence_is_persisted(store):
    AppointmentRepository(store, clock=FixedClock(7.0)).create(Appointment.from_dict(make_appointment()))
    assert store.get(APPOINTMENT_SEQ_KEY, None) == 7000
