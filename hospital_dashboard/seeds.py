"""
Demo data written on app startup for any collection that is missing or empty.
"""
import logging

from hospital_dashboard.services.store import Store, USERS_KEY, PATIENTS_KEY, APPOINTMENTS_KEY

logger = logging.getLogger(__name__)

DEMO_USERS = [
    {'username': 'emily.white', 'password': 'password123', 'role': 'Doctor', 'fullName': 'Dr. Emily White'},
    {'username': 'john.doe', 'password': 'password123', 'role': 'Nurse', 'fullName': 'John Doe, RN'},
    {'username': 'admin', 'password': 'admin123', 'role': 'Administrator', 'fullName': 'System Admin'},
]

DEMO_PATIENTS = [
    {'id': 'P-101', 'name': 'John Doe', 'dob': '1985-03-15', 'gender': 'Male', 'bloodType': 'O+', 'department': 'Cardiology', 'status': 'Stable'},
    {'id': 'P-102', 'name': 'Jane Smith', 'dob': '1992-11-22', 'gender': 'Female', 'bloodType': 'A-', 'department': 'Emergency', 'status': 'Critical'},
    {'id': 'P-103', 'name': 'Robert Johnson', 'dob': '1978-07-01', 'gender': 'Male', 'bloodType': 'B+', 'department': 'Pediatrics', 'status': 'Admitted'},
    {'id': 'P-104', 'name': 'Emily Davis', 'dob': '2001-02-28', 'gender': 'Female', 'bloodType': 'AB+', 'department': 'Orthopedics', 'status': 'Awaiting Discharge'},
    {'id': 'P-105', 'name': 'William Garcia', 'dob': '1965-09-10', 'gender': 'Male', 'bloodType': 'O-', 'department': 'Oncology', 'status': 'Under Treatment'},
    {'id': 'P-106', 'name': 'Sophia Miller', 'dob': '1990-05-20', 'gender': 'Female', 'bloodType': 'A+', 'department': 'General Practice', 'status': 'Stable'},
    {'id': 'P-107', 'name': 'James Brown', 'dob': '1975-01-01', 'gender': 'Male', 'bloodType': 'B-', 'department': 'Cardiology', 'status': 'Under Treatment'},
    {'id': 'P-108', 'name': 'Olivia White', 'dob': '2000-08-12', 'gender': 'Female', 'bloodType': 'O+', 'department': 'Dermatology', 'status': 'Stable'},
    {'id': 'P-109', 'name': 'David Wilson', 'dob': '1988-04-25', 'gender': 'Male', 'bloodType': 'AB-', 'department': 'Pediatrics', 'status': 'Admitted'},
    {'id': 'P-110', 'name': 'Ava Johnson', 'dob': '1995-12-03', 'gender': 'Female', 'bloodType': 'A-', 'department': 'Emergency', 'status': 'Critical'},
    {'id': 'P-111', 'name': 'Daniel Davis', 'dob': '1970-06-18', 'gender': 'Male', 'bloodType': 'O+', 'department': 'Orthopedics', 'status': 'Awaiting Discharge'},
    {'id': 'P-112', 'name': 'Mia Garcia', 'dob': '1982-02-07', 'gender': 'Female', 'bloodType': 'B+', 'department': 'Oncology', 'status': 'Under Treatment'},
    {'id': 'P-113', 'name': 'Noah Miller', 'dob': '1998-09-29', 'gender': 'Male', 'bloodType': 'A+', 'department': 'General Practice', 'status': 'Stable'},
    {'id': 'P-114', 'name': 'Isabella Brown', 'dob': '1960-03-05', 'gender': 'Female', 'bloodType': 'B-', 'department': 'Cardiology', 'status': 'Under Treatment'},
    {'id': 'P-115', 'name': 'Liam Wilson', 'dob': '2005-07-11', 'gender': 'Male', 'bloodType': 'O+', 'department': 'Pediatrics', 'status': 'Stable'},
    {'id': 'P-116', 'name': 'Charlotte Smith', 'dob': '1993-10-14', 'gender': 'Female', 'bloodType': 'AB+', 'department': 'Dermatology', 'status': 'Awaiting Discharge'},
]

DEMO_APPOINTMENTS = [
    {'id': 'A-001', 'patientName': 'Michael Brown', 'date': '2025-06-13', 'time': '13:00', 'doctor': 'Dr. Sarah Lee', 'department': 'General Practice', 'reason': 'Follow-up'},
    {'id': 'A-002', 'patientName': 'Olivia Wilson', 'date': '2025-06-13', 'time': '14:30', 'doctor': 'Dr. Alex Kim', 'department': 'Pediatrics', 'reason': 'Vaccination'},
    {'id': 'A-003', 'patientName': 'David Miller', 'date': '2025-06-14', 'time': '09:00', 'doctor': 'Dr. Jessica Chen', 'department': 'Dermatology', 'reason': 'Rash check-up'},
    {'id': 'A-004', 'patientName': 'Sophia Martinez', 'date': '2025-06-15', 'time': '10:00', 'doctor': 'Dr. Robert Green', 'department': 'Orthopedics', 'reason': 'Post-surgery check'},
    {'id': 'A-005', 'patientName': 'James Brown', 'date': '2025-06-20', 'time': '11:00', 'doctor': 'Dr. Emily White', 'department': 'Cardiology', 'reason': 'Annual check-up'},
    {'id': 'A-006', 'patientName': 'Liam Wilson', 'date': '2025-06-20', 'time': '14:00', 'doctor': 'Dr. Sarah Lee', 'department': 'Pediatrics', 'reason': 'Fever'},
    {'id': 'A-007', 'patientName': 'Ava Johnson', 'date': '2025-06-21', 'time': '09:30', 'doctor': 'Dr. Alex Kim', 'department': 'Emergency', 'reason': 'Acute pain'},
    {'id': 'A-008', 'patientName': 'Charlotte Smith', 'date': '2025-06-22', 'time': '16:00', 'doctor': 'Dr. Jessica Chen', 'department': 'Dermatology', 'reason': 'Skin irritation'},
]

DEMO_COLLECTIONS = (
    (USERS_KEY, DEMO_USERS),
    (PATIENTS_KEY, DEMO_PATIENTS),
    (APPOINTMENTS_KEY, DEMO_APPOINTMENTS),
)


def seed_demo_data(store: Store) -> list:
    """Write the demo records into every empty collection. Returns the keys seeded."""
    seeded = []
    for key, records in DEMO_COLLECTIONS:
        existing = store.get(key, None)
        if existing:
            continue
        if store.set(key, [dict(r) for r in records]):
            seeded.append(key)
            logger.info("Seeded %d default %s", len(records), key)
        else:
            logger.warning("Demo data seeding skipped for %s", key)
    return seeded
