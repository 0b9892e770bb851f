from datetime import date

import pytest

from hospital_dashboard.models import Patient, Appointment
from hospital_dashboard.seeds import DEMO_PATIENTS, DEMO_APPOINTMENTS
from hospital_dashboard.services.analytics_service import (
    age_bucket,
    age_on,
    age_distribution,
    appointments_trend,
    bed_occupancy,
    compute_analytics,
    dashboard_summary,
)
from tests.factories import make_patient

TODAY = date(2025, 6, 15)


def patients_born(*dobs):
    return [Patient.from_dict(make_patient(id=f'P-{i}', dob=dob)) for i, dob in enumerate(dobs)]


@pytest.mark.parametrize('age, bucket', [
    (0, '0-18'), (18, '0-18'), (19, '19-45'), (45, '19-45'),
    (46, '46-65'), (65, '46-65'), (66, '65+'), (101, '65+'),
])
def test_age_bucket_boundaries(age, bucket):
    assert age_bucket(age) == bucket


def test_age_counts_birthday_as_completed():
    assert age_on(date(2006, 6, 15), TODAY) == 19
    assert age_on(date(2006, 6, 16), TODAY) == 18


def test_age_distribution():
    patients = patients_born('2007-06-15', '2006-06-15', '1980-06-15', '1979-06-15', '1960-06-15', '1959-06-15')
    assert age_distribution(patients, TODAY) == {'0-18': 1, '19-45': 2, '46-65': 2, '65+': 1}


def test_age_distribution_skips_unreadable_birth_dates():
    patients = patients_born('1990-01-01', 'not-a-date', '')
    assert sum(age_distribution(patients, TODAY).values()) == 1


def test_trend_covers_trailing_week_oldest_first():
    appointments = [Appointment.from_dict(a) for a in DEMO_APPOINTMENTS]
    trend = appointments_trend(appointments, TODAY)
    assert trend.labels == ['Jun 9', 'Jun 10', 'Jun 11', 'Jun 12', 'Jun 13', 'Jun 14', 'Jun 15']
    assert trend.series == [0, 0, 0, 0, 2, 1, 1]


def test_trend_with_no_appointments():
    trend = appointments_trend([], TODAY)
    assert len(trend.labels) == 7
    assert trend.series == [0] * 7


def test_bed_occupancy_never_negative():
    assert bed_occupancy(16, 1500).series == [16, 1484]
    assert bed_occupancy(20, 10).series == [20, 0]


def test_snapshot_over_demo_data():
    patients = [Patient.from_dict(p) for p in DEMO_PATIENTS]
    appointments = [Appointment.from_dict(a) for a in DEMO_APPOINTMENTS]
    snapshot = compute_analytics(patients, appointments, today=TODAY)

    assert snapshot.gender.labels == ['Male', 'Female']
    assert snapshot.gender.series == [8, 8]
    assert snapshot.status.labels == ['Stable', 'Critical', 'Admitted', 'Awaiting Discharge', 'Under Treatment']
    assert snapshot.status.series == [5, 2, 2, 3, 4]
    assert sum(snapshot.department.series) == 16
    assert sum(snapshot.age.series) == 16
    assert snapshot.total_patients == 16
    assert snapshot.total_appointments == 8


def test_blood_type_chart_skips_missing_values():
    patients = [
        Patient.from_dict(make_patient(id='P-1', bloodType='O+')),
        Patient.from_dict(make_patient(id='P-2', bloodType=None)),
        Patient.from_dict(make_patient(id='P-3', bloodType='O+')),
    ]
    snapshot = compute_analytics(patients, [], today=TODAY)
    assert snapshot.blood_type.to_dict() == {'labels': ['O+'], 'series': [2]}


def test_empty_collections():
    data = compute_analytics([], [], today=TODAY).to_dict()
    assert data['gender'] == {'labels': [], 'series': []}
    assert data['age']['series'] == [0, 0, 0, 0]
    assert data['bedOccupancy']['series'] == [0, 1500]
    assert data['totalPatients'] == 0


def test_dashboard_summary():
    patients = [Patient.from_dict(p) for p in DEMO_PATIENTS]
    appointments = [Appointment.from_dict(a) for a in DEMO_APPOINTMENTS]
    assert dashboard_summary(patients, appointments, today=date(2025, 6, 20)) == {
        'totalPatients': 16,
        'criticalPatients': 2,
        'totalAppointments': 8,
        'appointmentsToday': 2,
        'upcomingAppointments': 4,
    }
