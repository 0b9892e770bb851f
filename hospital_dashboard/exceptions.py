"""
Error taxonomy for the dashboard core.
Every error is recoverable and carries the HTTP status used when it reaches a route.
"""


class DashboardError(Exception):
    status_code = 400
    default_message = 'Request could not be completed'

    def __init__(self, message: str = None, details: dict = None):
        self.message = message or self.default_message
        self.details = details or {}
        super().__init__(self.message)

    def to_dict(self):
        payload = {'success': False, 'error': self.message}
        if self.details:
            payload['details'] = self.details
        return payload


class DuplicateId(DashboardError):
    status_code = 409
    default_message = 'Record ID already exists'


class DuplicateUsername(DashboardError):
    status_code = 409
    default_message = 'Username already exists. Please choose a different one.'


class InvalidFormat(DashboardError):
    status_code = 400
    default_message = 'Invalid input'


class NotFound(DashboardError):
    status_code = 404
    default_message = 'Record not found'


class InvalidCredentials(DashboardError):
    status_code = 401
    default_message = 'Invalid username or password.'


class PasswordMismatch(DashboardError):
    status_code = 400
    default_message = 'New password and confirmation do not match.'


class PermissionDenied(DashboardError):
    status_code = 403
    default_message = 'Permission Denied'


class StorageUnavailable(DashboardError):
    status_code = 503
    default_message = 'Local storage is unavailable. Please try again.'
