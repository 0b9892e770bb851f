import re
from dataclasses import dataclass, field
from typing import Any, Dict

from .base import known_only, text, split_extra, parse_date, require_fields
from hospital_dashboard.exceptions import InvalidFormat

_TIME_RE = re.compile(r'^([01]\d|2[0-3]):[0-5]\d$')

_FIELDS = ('id', 'patientName', 'date', 'time', 'doctor', 'department', 'reason')


@dataclass
class Appointment:
    id: str  # e.g., A-1718200000000, generated by the repository
    patient_name: str
    date: str  # YYYY-MM-DD
    time: str  # HH:MM
    doctor: str  # e.g., Dr. Sarah Lee
    department: str
    reason: str = ''
    extra: Dict[str, Any] = field(default_factory=dict, repr=False, compare=False)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'Appointment':
        return cls(
            id=text(data.get('id')),
            patient_name=text(data.get('patientName')),
            date=text(data.get('date')),
            time=text(data.get('time')),
            doctor=text(data.get('doctor')),
            department=text(data.get('department')),
            reason=text(data.get('reason')),
            extra=split_extra(data, _FIELDS),
        )

    @classmethod
    def from_input(cls, data: Dict[str, Any]) -> 'Appointment':
        """Build from a request body; unknown fields and any ``id`` are discarded."""
        fields = known_only(data, _FIELDS)
        fields.pop('id', None)
        return cls.from_dict(fields)

    def with_changes(self, data: Dict[str, Any]) -> 'Appointment':
        return self.from_dict({**self.to_dict(), **known_only(data, _FIELDS)})

    def to_dict(self) -> Dict[str, Any]:
        return {
            **self.extra,
            'id': self.id,
            'patientName': self.patient_name,
            'date': self.date,
            'time': self.time,
            'doctor': self.doctor,
            'department': self.department,
            'reason': self.reason,
        }

    @property
    def start(self) -> str:
        """Calendar start in YYYY-MM-DDTHH:MM form."""
        return f"{self.date}T{self.time}"

    def validate(self):
        require_fields('Appointment', [
            ('patientName', self.patient_name),
            ('date', self.date),
            ('time', self.time),
            ('doctor', self.doctor),
            ('department', self.department),
        ])
        if parse_date(self.date) is None or len(self.date) != 10:
            raise InvalidFormat('Invalid date format. Use YYYY-MM-DD')
        if not _TIME_RE.match(self.time):
            raise InvalidFormat('Invalid time format. Use HH:MM (e.g., 10:30)')

    def __repr__(self):
        return f"<Appointment {self.patient_name} - {self.doctor} on {self.date} {self.time}>"
