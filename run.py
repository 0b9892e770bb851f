"""
Development server entry point
Run with: python run.py (or point a WSGI server at run:app)
"""
from hospital_dashboard import create_app
import os

# Create Flask app instance
app = create_app()

if __name__ == '__main__':
    # Get host and port from environment or use defaults
    host = os.getenv('FLASK_HOST', '127.0.0.1')
    port = int(os.getenv('FLASK_PORT', 5000))
    debug = os.getenv('FLASK_ENV', 'development') == 'development'

    print(f"""
    ========================================
    Starting Hospital Dashboard
    ========================================
    Host: {host}
    Port: {port}
    Debug: {debug}
    Environment: {os.getenv('FLASK_ENV', 'development')}
    Store: {app.config['SQLALCHEMY_DATABASE_URI']}
    ========================================
    """)

    # Single local store: keep request handling single-threaded
    app.run(
        host=host,
        port=port,
        debug=debug,
        threaded=False
    )
