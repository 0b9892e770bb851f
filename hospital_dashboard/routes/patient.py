from flask import Blueprint, request, jsonify
from hospital_dashboard.exceptions import NotFound
from hospital_dashboard.models import Patient
from hospital_dashboard.services.store import get_store
from hospital_dashboard.services.repositories import PatientRepository
from hospital_dashboard.services.filtering import PatientFilter, filter_patients, paginate
from hospital_dashboard.utils.decorators import require_permission
from hospital_dashboard.utils.permissions import Action
from hospital_dashboard.utils.http import json_body, page_args

patient_bp = Blueprint('patient', __name__, url_prefix='/api/patients')


@patient_bp.route('', methods=['GET'])
@require_permission(Action.VIEW_PATIENT)
def list_patients():
    """
    List patients with filters and pagination
    Query params: search, gender, department, status, bloodType, page, limit
    """
    # Step 1: Get query parameters
    page, limit = page_args()
    spec = PatientFilter.from_args(request.args)

    # Step 2: Filter the full collection, then window it
    patients = PatientRepository(get_store()).list()
    result = paginate(filter_patients(patients, spec), limit, page)

    return jsonify({
        'success': True,
        'data': [p.to_dict() for p in result.items],
        'pagination': result.pagination()
    }), 200


@patient_bp.route('/<patient_id>', methods=['GET'])
@require_permission(Action.VIEW_PATIENT)
def get_patient(patient_id):
    """
    Get single patient by ID
    """
    patient = PatientRepository(get_store()).find(patient_id)
    if not patient:
        return jsonify({
            'success': False,
            'error': 'Patient not found'
        }), 404

    return jsonify({
        'success': True,
        'data': patient.to_dict()
    }), 200


@patient_bp.route('', methods=['POST'])
@require_permission(Action.ADD_PATIENT)
def create_patient():
    """
    Create new patient (ID supplied by the user, must be unique)
    Access: Administrator, Doctor
    """
    data = json_body()
    patient = PatientRepository(get_store()).create(Patient.from_input(data))

    return jsonify({
        'success': True,
        'data': patient.to_dict(),
        'message': 'New patient added successfully!'
    }), 201


@patient_bp.route('/<patient_id>', methods=['PUT'])
@require_permission(Action.EDIT_PATIENT)
def update_patient(patient_id):
    """
    Update patient information (only provided fields; the ID cannot change)
    Access: Administrator, Doctor
    """
    data = json_body()
    repo = PatientRepository(get_store())

    # Step 1: Find patient
    existing = repo.find(patient_id)
    if existing is None:
        raise NotFound('Patient not found for update.')

    # Step 2: Merge the provided fields over the stored record and replace it
    updated = existing.with_changes(data)
    patient = repo.update(patient_id, updated)

    return jsonify({
        'success': True,
        'data': patient.to_dict(),
        'message': 'Patient record updated successfully!'
    }), 200


@patient_bp.route('/<patient_id>', methods=['DELETE'])
@require_permission(Action.DELETE_PATIENT)
def delete_patient(patient_id):
    """
    Delete patient
    Access: Administrator
    """
    PatientRepository(get_store()).delete(patient_id)
    return jsonify({
        'success': True,
        'message': f'Patient ID: {patient_id} deleted successfully!'
    }), 200
