"""
Analytics and dashboard figures, recomputed from the stored collections on every request
"""
from flask import Blueprint, jsonify, current_app
from hospital_dashboard.services.store import get_store
from hospital_dashboard.services.repositories import PatientRepository, AppointmentRepository
from hospital_dashboard.services.analytics_service import compute_analytics, dashboard_summary
from hospital_dashboard.utils.decorators import login_required, require_permission
from hospital_dashboard.utils.permissions import Action

analytics_bp = Blueprint('analytics', __name__, url_prefix='/api')


@analytics_bp.route('/analytics', methods=['GET'])
@require_permission(Action.VIEW_ANALYTICS)
def get_analytics():
    """Chart payloads ({labels, series}) for the analytics page"""
    store = get_store()
    snapshot = compute_analytics(
        PatientRepository(store).list(),
        AppointmentRepository(store).list(),
        total_beds=current_app.config['TOTAL_BEDS'],
    )
    return jsonify({
        'success': True,
        'data': snapshot.to_dict()
    }), 200


@analytics_bp.route('/dashboard/summary', methods=['GET'])
@login_required
def get_dashboard_summary():
    """KPI cards on the dashboard"""
    store = get_store()
    return jsonify({
        'success': True,
        'data': dashboard_summary(
            PatientRepository(store).list(),
            AppointmentRepository(store).list(),
        )
    }), 200
