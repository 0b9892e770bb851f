from .store import (
    Store,
    get_store,
    USERS_KEY,
    PATIENTS_KEY,
    APPOINTMENTS_KEY,
    SESSION_KEY,
)

from .repositories import (
    Repository,
    UserRepository,
    PatientRepository,
    AppointmentRepository,
)

from .filtering import (
    PatientFilter,
    AppointmentFilter,
    Page,
    ListingState,
    filter_patients,
    filter_appointments,
    paginate,
    to_calendar_events,
)

from .analytics_service import AnalyticsSnapshot, compute_analytics, dashboard_summary

from .session_service import SessionService, Continue, RedirectTo, user_initials

__all__ = [
    # Store
    "Store",
    "get_store",
    "USERS_KEY",
    "PATIENTS_KEY",
    "APPOINTMENTS_KEY",
    "SESSION_KEY",
    # Repositories
    "Repository",
    "UserRepository",
    "PatientRepository",
    "AppointmentRepository",
    # Filter/Paginate
    "PatientFilter",
    "AppointmentFilter",
    "Page",
    "ListingState",
    "filter_patients",
    "filter_appointments",
    "paginate",
    "to_calendar_events",
    # Analytics
    "AnalyticsSnapshot",
    "compute_analytics",
    "dashboard_summary",
    # Session
    "SessionService",
    "Continue",
    "RedirectTo",
    "user_initials",
]
