"""
Request parsing shared by the API blueprints
"""
from flask import request, current_app
from hospital_dashboard.exceptions import InvalidFormat


def json_body():
    """The request's JSON object; anything else is rejected as InvalidFormat."""
    data = request.get_json(silent=True)
    if not isinstance(data, dict):
        raise InvalidFormat('Request body must be JSON')
    return data


def page_args():
    """(page, limit) from the query string, falling back to the configured defaults."""
    default_limit = current_app.config['PATIENTS_PER_PAGE']
    page = request.args.get('page', 1, type=int)
    limit = request.args.get('limit', default_limit, type=int)
    if limit < 1 or limit > current_app.config['MAX_PAGE_SIZE']:
        limit = default_limit
    return page, limit
