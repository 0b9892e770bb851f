from flask import Blueprint, request, jsonify
from hospital_dashboard.exceptions import NotFound
from hospital_dashboard.models import Appointment
from hospital_dashboard.services.store import get_store
from hospital_dashboard.services.repositories import AppointmentRepository
from hospital_dashboard.services.filtering import AppointmentFilter, filter_appointments, paginate, to_calendar_events
from hospital_dashboard.utils.decorators import login_required, require_permission
from hospital_dashboard.utils.permissions import Action
from hospital_dashboard.utils.http import json_body, page_args

appointment_bp = Blueprint('appointment', __name__, url_prefix='/api/appointments')


@appointment_bp.route('', methods=['GET'])
@login_required
def list_appointments():
    """
    List appointments with filters and pagination.
    Query params:
        search: matches patient name, doctor or reason (optional)
        department: exact department (optional)
        page, limit: Pagination
    """
    page, limit = page_args()
    spec = AppointmentFilter.from_args(request.args)

    appointments = AppointmentRepository(get_store()).list()
    result = paginate(filter_appointments(appointments, spec), limit, page)

    return jsonify({
        'success': True,
        'data': [a.to_dict() for a in result.items],
        'pagination': result.pagination()
    }), 200


@appointment_bp.route('/events', methods=['GET'])
@login_required
def calendar_events():
    """
    Calendar event feed (same filters as the list, no pagination).
    """
    spec = AppointmentFilter.from_args(request.args)
    appointments = AppointmentRepository(get_store()).list()
    return jsonify(to_calendar_events(filter_appointments(appointments, spec))), 200


@appointment_bp.route('/<appointment_id>', methods=['GET'])
@require_permission(Action.EDIT_APPOINTMENT)
def get_appointment(appointment_id):
    """
    Get single appointment by ID (opens the edit view).
    """
    appointment = AppointmentRepository(get_store()).find(appointment_id)
    if not appointment:
        return jsonify({'success': False, 'error': 'Appointment not found'}), 404
    return jsonify({
        'success': True,
        'data': appointment.to_dict()
    }), 200


@appointment_bp.route('', methods=['POST'])
@require_permission(Action.SCHEDULE_APPOINTMENT)
def create_appointment():
    """
    Schedule a new appointment; the ID is generated here.
    Access: Administrator, Doctor, Nurse
    """
    data = json_body()
    appointment = AppointmentRepository(get_store()).create(Appointment.from_input(data))

    return jsonify({
        'success': True,
        'data': appointment.to_dict(),
        'message': 'New appointment scheduled successfully!'
    }), 201


@appointment_bp.route('/<appointment_id>', methods=['PUT'])
@require_permission(Action.EDIT_APPOINTMENT)
def update_appointment(appointment_id):
    """
    Update appointment (only provided fields)
    Access: Administrator, Doctor, Nurse
    """
    data = json_body()
    repo = AppointmentRepository(get_store())

    existing = repo.find(appointment_id)
    if existing is None:
        raise NotFound('Appointment not found for update.')

    updated = existing.with_changes(data)
    appointment = repo.update(appointment_id, updated)

    return jsonify({
        'success': True,
        'data': appointment.to_dict(),
        'message': 'Appointment updated successfully!'
    }), 200


@appointment_bp.route('/<appointment_id>/reschedule', methods=['PATCH'])
@require_permission(Action.RESCHEDULE_APPOINTMENT)
def reschedule_appointment(appointment_id):
    """
    Move an appointment (calendar drag-drop).
    Body: { "start": "YYYY-MM-DD" | "YYYY-MM-DDTHH:MM" }
    Access: Administrator, Doctor
    """
    data = json_body()
    start = data.get('start')
    if not start:
        return jsonify({
            'success': False,
            'error': 'Field "start" is required'
        }), 400

    appointment = AppointmentRepository(get_store()).reschedule(appointment_id, start)

    return jsonify({
        'success': True,
        'data': appointment.to_dict(),
        'message': 'Appointment rescheduled!'
    }), 200


@appointment_bp.route('/<appointment_id>', methods=['DELETE'])
@require_permission(Action.DELETE_APPOINTMENT)
def delete_appointment(appointment_id):
    """
    Delete appointment
    Access: Administrator, Doctor
    """
    AppointmentRepository(get_store()).delete(appointment_id)
    return jsonify({
        'success': True,
        'message': 'Appointment deleted successfully!'
    }), 200
