"""
Page guard endpoint: the first call every page makes before any other logic
"""
from flask import Blueprint, jsonify
from hospital_dashboard.services.store import get_store
from hospital_dashboard.services.session_service import SessionService, RedirectTo, PAGE_TITLES

pages_bp = Blueprint('pages', __name__, url_prefix='/api/pages')


@pages_bp.route('/<page_kind>', methods=['GET'])
def page(page_kind):
    """
    Returns either { redirect: <page> } or the page context
    (title, user display, permission flags).
    """
    if page_kind not in PAGE_TITLES:
        return jsonify({
            'success': False,
            'error': 'Page not found'
        }), 404

    service = SessionService(get_store())
    result = service.require_auth(page_kind)
    if isinstance(result, RedirectTo):
        return jsonify({
            'success': True,
            'redirect': result.target
        }), 200

    return jsonify({
        'success': True,
        'data': service.page_context(page_kind)
    }), 200
