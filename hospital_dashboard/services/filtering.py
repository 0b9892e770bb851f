"""
Filter/Paginate Engine
Pure functions over full record lists. Filters preserve store order.
"""
import math
from dataclasses import dataclass, field, replace
from typing import Any, Dict, List, Optional, Sequence

from hospital_dashboard.models import Patient, Appointment


@dataclass(frozen=True)
class PatientFilter:
    search: str = ''
    gender: str = ''
    department: str = ''
    status: str = ''
    blood_type: str = ''

    @classmethod
    def from_args(cls, args) -> 'PatientFilter':
        return cls(
            search=(args.get('search') or '').strip(),
            gender=args.get('gender') or '',
            department=args.get('department') or '',
            status=args.get('status') or '',
            blood_type=args.get('bloodType') or '',
        )


@dataclass(frozen=True)
class AppointmentFilter:
    search: str = ''
    department: str = ''

    @classmethod
    def from_args(cls, args) -> 'AppointmentFilter':
        return cls(
            search=(args.get('search') or '').strip(),
            department=args.get('department') or '',
        )


def filter_patients(patients: Sequence[Patient], spec: Optional[PatientFilter] = None) -> List[Patient]:
    """
    Every non-empty criterion must match. ``search`` is a case-insensitive
    substring of the name or the id.
    """
    spec = spec or PatientFilter()
    term = spec.search.lower()

    def matches(p: Patient) -> bool:
        if term and term not in p.name.lower() and term not in p.id.lower():
            return False
        if spec.gender and p.gender != spec.gender:
            return False
        if spec.department and p.department != spec.department:
            return False
        if spec.status and p.status != spec.status:
            return False
        if spec.blood_type and p.blood_type != spec.blood_type:
            return False
        return True

    return [p for p in patients if matches(p)]


def filter_appointments(appointments: Sequence[Appointment], spec: Optional[AppointmentFilter] = None) -> List[Appointment]:
    """``search`` matches patient name, doctor or reason; ``department`` is exact."""
    spec = spec or AppointmentFilter()
    term = spec.search.lower()

    def matches(a: Appointment) -> bool:
        if term and not any(term in value.lower() for value in (a.patient_name, a.doctor, a.reason)):
            return False
        if spec.department and a.department != spec.department:
            return False
        return True

    return [a for a in appointments if matches(a)]


@dataclass
class Page:
    items: List[Any]
    total_pages: int
    page_number: int
    page_size: int
    total: int

    @property
    def has_next(self) -> bool:
        return self.page_number < self.total_pages

    @property
    def has_prev(self) -> bool:
        return self.page_number > 1

    def pagination(self) -> Dict[str, Any]:
        return {
            'page': self.page_number,
            'limit': self.page_size,
            'total': self.total,
            'pages': self.total_pages,
            'has_next': self.has_next,
            'has_prev': self.has_prev,
        }


def paginate(items: Sequence[Any], page_size: int, page_number: int) -> Page:
    """
    Window ``items`` into pages of ``page_size``. There is always at least one
    page, and ``page_number`` is clamped into ``[1, total_pages]``.
    """
    if page_size < 1:
        raise ValueError('page_size must be positive')
    total = len(items)
    total_pages = max(1, math.ceil(total / page_size))
    page_number = min(max(1, page_number), total_pages)
    start = (page_number - 1) * page_size
    return Page(
        items=list(items[start:start + page_size]),
        total_pages=total_pages,
        page_number=page_number,
        page_size=page_size,
        total=total,
    )


@dataclass
class ListingState:
    """
    Filter and page position for one table view, owned by the presentation
    layer. Changing the filter returns to page 1; paging keeps the filter.
    """
    page_size: int = 10
    criteria: Any = field(default_factory=PatientFilter)
    page_number: int = 1

    def apply_filter(self, new_filter=None, **changes) -> 'ListingState':
        if new_filter is None:
            new_filter = replace(self.criteria, **changes)
        self.criteria = new_filter
        self.page_number = 1
        return self

    def reset_filters(self) -> 'ListingState':
        return self.apply_filter(type(self.criteria)())

    def go_to_page(self, page_number: int) -> 'ListingState':
        self.page_number = page_number
        return self

    def next_page(self) -> 'ListingState':
        return self.go_to_page(self.page_number + 1)

    def prev_page(self) -> 'ListingState':
        return self.go_to_page(max(1, self.page_number - 1))

    def render(self, records: Sequence[Any]) -> Page:
        """Filter ``records`` and return the current page, clamping the stored position."""
        if isinstance(self.criteria, AppointmentFilter):
            filtered = filter_appointments(records, self.criteria)
        else:
            filtered = filter_patients(records, self.criteria)
        page = paginate(filtered, self.page_size, self.page_number)
        self.page_number = page.page_number
        return page


def event_title(appointment: Appointment) -> str:
    doctor = appointment.doctor
    if not doctor.lower().startswith('dr.'):
        doctor = f"Dr. {doctor}"
    return f"{appointment.patient_name} - {doctor}"


def to_calendar_events(appointments: Sequence[Appointment]) -> List[Dict[str, Any]]:
    """Event list in the shape the calendar renderer consumes."""
    return [
        {
            'id': a.id,
            'title': event_title(a),
            'start': a.start,
            'extendedProps': {
                'patientName': a.patient_name,
                'doctor': a.doctor,
                'department': a.department,
                'reason': a.reason,
            },
        }
        for a in appointments
    ]
