import pytest

from hospital_dashboard import create_app
from hospital_dashboard.extensions import db
from hospital_dashboard.services.store import Store, USERS_KEY, PATIENTS_KEY, APPOINTMENTS_KEY
from hospital_dashboard.seeds import DEMO_USERS
from tests.factories import make_patient, make_appointment, login


@pytest.fixture
def app():
    app = create_app('testing')
    with app.app_context():
        yield app
        db.session.remove()
        db.drop_all()


@pytest.fixture
def store(app):
    return Store(db.session)


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def users(store):
    store.set(USERS_KEY, [dict(u) for u in DEMO_USERS])
    return store.get(USERS_KEY)


@pytest.fixture
def patients(store):
    records = [
        make_patient(id='P-101', name='John Doe', gender='Male', department='Cardiology', status='Stable'),
        make_patient(id='P-102', name='Jane Smith', gender='Female', department='Emergency', status='Critical', bloodType='A-'),
        make_patient(id='P-103', name='Robert Johnson', gender='Male', department='Pediatrics', status='Admitted', bloodType='B+'),
        make_patient(id='P-110', name='Ava Johnson', gender='Female', department='Emergency', status='Critical', bloodType='A-'),
    ]
    store.set(PATIENTS_KEY, records)
    return records


@pytest.fixture
def appointments(store):
    records = [
        dict(make_appointment(), id='A-001'),
        dict(make_appointment(patientName='Olivia Wilson', doctor='Dr. Alex Kim', department='Pediatrics', reason='Vaccination', time='14:30'), id='A-002'),
        dict(make_appointment(patientName='David Miller', doctor='Dr. Jessica Chen', department='Dermatology', reason='Rash check-up', date='2025-06-14'), id='A-003'),
    ]
    store.set(APPOINTMENTS_KEY, records)
    return records


@pytest.fixture
def as_admin(client, users):
    login(client, 'admin', 'admin123')
    return client


@pytest.fixture
def as_doctor(client, users):
    login(client, 'emily.white', 'password123')
    return client


@pytest.fixture
def as_nurse(client, users):
    login(client, 'john.doe', 'password123')
    return client
