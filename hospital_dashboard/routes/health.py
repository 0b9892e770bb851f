"""
Health check endpoints for monitoring
"""
from flask import Blueprint, jsonify
from sqlalchemy.exc import SQLAlchemyError
from hospital_dashboard.extensions import db
from hospital_dashboard.models import StoreEntry
from hospital_dashboard.services.store import USERS_KEY, PATIENTS_KEY, APPOINTMENTS_KEY
from datetime import datetime

health_bp = Blueprint('health', __name__, url_prefix='/health')

COLLECTIONS = (USERS_KEY, PATIENTS_KEY, APPOINTMENTS_KEY)


@health_bp.route('', methods=['GET'])
@health_bp.route('/ping', methods=['GET'])
def health_check():
    """Liveness plus service name; never touches the store"""
    return jsonify({
        'status': 'healthy',
        'timestamp': datetime.utcnow().isoformat(),
        'service': 'hospital-dashboard'
    }), 200


@health_bp.route('/ready', methods=['GET'])
def readiness_check():
    """
    Ready once the store table answers. Also reports which collections
    have been written (an unseeded install is still ready).
    """
    try:
        db.session.execute(db.text('SELECT 1'))
        present = {
            entry.key
            for entry in db.session.query(StoreEntry).filter(StoreEntry.key.in_(COLLECTIONS))
        }
        store_status = 'connected'
    except SQLAlchemyError as e:
        db.session.rollback()
        present = set()
        store_status = f'error: {str(e)}'

    ready = store_status == 'connected'
    return jsonify({
        'status': 'ready' if ready else 'not_ready',
        'store': store_status,
        'collections': {key: key in present for key in COLLECTIONS},
        'timestamp': datetime.utcnow().isoformat()
    }), 200 if ready else 503


@health_bp.route('/live', methods=['GET'])
def liveness_check():
    return jsonify({
        'status': 'alive',
        'timestamp': datetime.utcnow().isoformat()
    }), 200
