from .auth import auth_bp
from .patient import patient_bp
from .appointment import appointment_bp
from .analytics import analytics_bp
from .pages import pages_bp
from .health import health_bp

__all__ = ['auth_bp', 'patient_bp', 'appointment_bp', 'analytics_bp', 'pages_bp', 'health_bp']
