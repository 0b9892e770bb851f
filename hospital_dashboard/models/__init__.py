from .store_entry import StoreEntry
from .session import Session
from .user import User, ROLES
from .patient import Patient, PATIENT_STATUSES, GENDERS, BLOOD_TYPES
from .appointment import Appointment

__all__ = ["StoreEntry", "Session", "User", "Patient", "Appointment", "ROLES", "PATIENT_STATUSES", "GENDERS", "BLOOD_TYPES"]
