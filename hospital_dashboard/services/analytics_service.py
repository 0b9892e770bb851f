"""
Analytics Service
Chart-ready aggregates over the patient and appointment collections.
Every figure is recomputed from the source collections; nothing is cached.
"""
from dataclasses import dataclass, field
from datetime import date, timedelta
from typing import Dict, List, Optional, Sequence

from hospital_dashboard.models import Patient, Appointment

AGE_BUCKETS = ('0-18', '19-45', '46-65', '65+')
TREND_DAYS = 7
DEFAULT_TOTAL_BEDS = 1500


@dataclass
class ChartSeries:
    labels: List[str] = field(default_factory=list)
    series: List[int] = field(default_factory=list)

    @classmethod
    def from_counts(cls, counts: Dict[str, int]) -> 'ChartSeries':
        return cls(labels=list(counts.keys()), series=list(counts.values()))

    def to_dict(self):
        return {'labels': self.labels, 'series': self.series}


@dataclass
class AnalyticsSnapshot:
    gender: ChartSeries
    department: ChartSeries
    status: ChartSeries
    age: ChartSeries
    blood_type: ChartSeries
    appointments_trend: ChartSeries
    bed_occupancy: ChartSeries
    total_patients: int
    total_appointments: int

    def to_dict(self):
        return {
            'gender': self.gender.to_dict(),
            'department': self.department.to_dict(),
            'status': self.status.to_dict(),
            'age': self.age.to_dict(),
            'bloodType': self.blood_type.to_dict(),
            'appointmentsTrend': self.appointments_trend.to_dict(),
            'bedOccupancy': self.bed_occupancy.to_dict(),
            'totalPatients': self.total_patients,
            'totalAppointments': self.total_appointments,
        }


def count_by(values) -> Dict[str, int]:
    """Occurrence counts in first-seen order."""
    counts: Dict[str, int] = {}
    for value in values:
        counts[value] = counts.get(value, 0) + 1
    return counts


def age_on(birth_date: date, today: date) -> int:
    """Completed years; the birthday itself counts as completed."""
    age = today.year - birth_date.year
    if (today.month, today.day) < (birth_date.month, birth_date.day):
        age -= 1
    return age


def age_bucket(age: int) -> str:
    if age <= 18:
        return '0-18'
    if age <= 45:
        return '19-45'
    if age <= 65:
        return '46-65'
    return '65+'


def age_distribution(patients: Sequence[Patient], today: date) -> Dict[str, int]:
    buckets = {bucket: 0 for bucket in AGE_BUCKETS}
    for p in patients:
        birth_date = p.birth_date
        if birth_date is None:
            continue
        buckets[age_bucket(age_on(birth_date, today))] += 1
    return buckets


def appointments_trend(appointments: Sequence[Appointment], today: date, days: int = TREND_DAYS) -> ChartSeries:
    """Appointments per day over the trailing ``days`` days ending today, oldest first."""
    dates = [today - timedelta(days=days - 1 - i) for i in range(days)]
    per_day = count_by(a.date for a in appointments)
    return ChartSeries(
        labels=[f"{d.strftime('%b')} {d.day}" for d in dates],
        series=[per_day.get(d.isoformat(), 0) for d in dates],
    )


def bed_occupancy(total_patients: int, total_beds: int) -> ChartSeries:
    return ChartSeries(
        labels=['Occupied Beds', 'Available Beds'],
        series=[total_patients, max(0, total_beds - total_patients)],
    )


def compute_analytics(
    patients: Sequence[Patient],
    appointments: Sequence[Appointment],
    today: Optional[date] = None,
    total_beds: int = DEFAULT_TOTAL_BEDS,
) -> AnalyticsSnapshot:
    today = today or date.today()
    return AnalyticsSnapshot(
        gender=ChartSeries.from_counts(count_by(p.gender for p in patients)),
        department=ChartSeries.from_counts(count_by(p.department for p in patients)),
        status=ChartSeries.from_counts(count_by(p.status for p in patients)),
        age=ChartSeries.from_counts(age_distribution(patients, today)),
        blood_type=ChartSeries.from_counts(count_by(p.blood_type for p in patients if p.blood_type)),
        appointments_trend=appointments_trend(appointments, today),
        bed_occupancy=bed_occupancy(len(patients), total_beds),
        total_patients=len(patients),
        total_appointments=len(appointments),
    )


def dashboard_summary(patients: Sequence[Patient], appointments: Sequence[Appointment], today: Optional[date] = None) -> dict:
    """KPI figures for the dashboard cards."""
    today = today or date.today()
    today_str = today.isoformat()
    return {
        'totalPatients': len(patients),
        'criticalPatients': sum(1 for p in patients if p.status == 'Critical'),
        'totalAppointments': len(appointments),
        'appointmentsToday': sum(1 for a in appointments if a.date == today_str),
        'upcomingAppointments': sum(1 for a in appointments if a.date >= today_str),
    }
