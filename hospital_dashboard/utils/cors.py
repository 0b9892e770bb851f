"""
Cross-origin access to the JSON API.
Only /api/* is exposed; health checks stay same-origin.
"""

API_METHODS = ["GET", "POST", "PUT", "PATCH", "DELETE", "OPTIONS"]
API_HEADERS = ["Content-Type", "Accept", "Origin", "X-Requested-With"]


def init_cors(app):
    """Allow the dashboard front end (served from CORS_ORIGINS) to call /api/*"""
    from flask_cors import CORS

    origins = app.config.get('CORS_ORIGINS', '*')
    CORS(app,
         resources={r"/api/*": {"origins": origins}},
         methods=API_METHODS,
         allow_headers=API_HEADERS,
         max_age=86400)

    app.logger.info("CORS enabled for /api/* (origins: %s)", origins)
