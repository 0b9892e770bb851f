from dataclasses import dataclass, field
from typing import Any, Dict, Optional

from .base import known_only, text, optional_text, split_extra, parse_date, require_fields, require_choice
from hospital_dashboard.exceptions import InvalidFormat

# Possible values for Patient.status
PATIENT_STATUSES = ('Stable', 'Critical', 'Admitted', 'Awaiting Discharge', 'Under Treatment')
GENDERS = ('Male', 'Female', 'Other')
BLOOD_TYPES = ('A+', 'A-', 'B+', 'B-', 'AB+', 'AB-', 'O+', 'O-')

_FIELDS = ('id', 'name', 'dob', 'gender', 'bloodType', 'department', 'status')


@dataclass
class Patient:
    id: str  # e.g., P-101, supplied by the user, immutable
    name: str
    dob: str  # YYYY-MM-DD
    gender: str
    department: str
    status: str
    blood_type: Optional[str] = None
    extra: Dict[str, Any] = field(default_factory=dict, repr=False, compare=False)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'Patient':
        return cls(
            id=text(data.get('id')),
            name=text(data.get('name')),
            dob=text(data.get('dob')),
            gender=text(data.get('gender')),
            department=text(data.get('department')),
            status=text(data.get('status')),
            blood_type=optional_text(data.get('bloodType')),
            extra=split_extra(data, _FIELDS),
        )

    @classmethod
    def from_input(cls, data: Dict[str, Any]) -> 'Patient':
        """Build from a request body; unknown fields are discarded."""
        return cls.from_dict(known_only(data, _FIELDS))

    def with_changes(self, data: Dict[str, Any]) -> 'Patient':
        """Copy with the known fields of ``data`` applied; stored extras are kept."""
        return self.from_dict({**self.to_dict(), **known_only(data, _FIELDS)})

    def to_dict(self) -> Dict[str, Any]:
        return {
            **self.extra,
            'id': self.id,
            'name': self.name,
            'dob': self.dob,
            'gender': self.gender,
            'bloodType': self.blood_type,
            'department': self.department,
            'status': self.status,
        }

    @property
    def birth_date(self):
        return parse_date(self.dob)

    def validate(self):
        require_fields('Patient', [
            ('id', self.id),
            ('name', self.name),
            ('dob', self.dob),
            ('gender', self.gender),
            ('department', self.department),
            ('status', self.status),
        ])
        if self.birth_date is None:
            raise InvalidFormat('Invalid date of birth. Use YYYY-MM-DD')
        require_choice('gender', self.gender, GENDERS)
        require_choice('status', self.status, PATIENT_STATUSES)
        if self.blood_type is not None:
            require_choice('bloodType', self.blood_type, BLOOD_TYPES)

    def __repr__(self):
        return f"<Patient {self.name} ({self.id})>"
