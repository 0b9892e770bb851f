"""
Authorization Policy
Single table mapping (role, action) to allow/deny.
"""
from enum import Enum


class Action(str, Enum):
    VIEW_PATIENT = 'viewPatient'
    ADD_PATIENT = 'addPatient'
    EDIT_PATIENT = 'editPatient'
    DELETE_PATIENT = 'deletePatient'
    SCHEDULE_APPOINTMENT = 'scheduleAppointment'
    EDIT_APPOINTMENT = 'editAppointment'
    DELETE_APPOINTMENT = 'deleteAppointment'
    RESCHEDULE_APPOINTMENT = 'rescheduleAppointment'
    VIEW_ANALYTICS = 'viewAnalytics'


ADMINISTRATOR = 'Administrator'
DOCTOR = 'Doctor'
NURSE = 'Nurse'

PERMISSIONS = {
    Action.VIEW_PATIENT: {ADMINISTRATOR, DOCTOR, NURSE},
    Action.ADD_PATIENT: {ADMINISTRATOR, DOCTOR},
    Action.EDIT_PATIENT: {ADMINISTRATOR, DOCTOR},
    Action.DELETE_PATIENT: {ADMINISTRATOR},
    Action.SCHEDULE_APPOINTMENT: {ADMINISTRATOR, DOCTOR, NURSE},
    Action.EDIT_APPOINTMENT: {ADMINISTRATOR, DOCTOR, NURSE},
    Action.DELETE_APPOINTMENT: {ADMINISTRATOR, DOCTOR},
    Action.RESCHEDULE_APPOINTMENT: {ADMINISTRATOR, DOCTOR},
    Action.VIEW_ANALYTICS: {ADMINISTRATOR, DOCTOR},
}

# Shown in the "Permission Denied" notice
DENIAL_MESSAGES = {
    Action.VIEW_PATIENT: 'You do not have permission to view patient records.',
    Action.ADD_PATIENT: 'You do not have permission to add patient records.',
    Action.EDIT_PATIENT: 'You do not have permission to edit patient records.',
    Action.DELETE_PATIENT: 'You do not have permission to delete patient records.',
    Action.SCHEDULE_APPOINTMENT: 'You do not have permission to schedule new appointments.',
    Action.EDIT_APPOINTMENT: 'You do not have permission to view appointment details.',
    Action.DELETE_APPOINTMENT: 'You do not have permission to delete appointments.',
    Action.RESCHEDULE_APPOINTMENT: 'You do not have permission to reschedule appointments.',
    Action.VIEW_ANALYTICS: 'You do not have permission to view analytics.',
}


def can_perform(role, action) -> bool:
    """True when ``role`` may perform ``action``; unknown roles and actions are denied."""
    try:
        action = Action(action)
    except ValueError:
        return False
    return role in PERMISSIONS[action]


def permissions_for(role) -> dict:
    """Every action mapped to allow/deny for ``role`` (used for feature visibility)."""
    return {action.value: can_perform(role, action) for action in Action}
