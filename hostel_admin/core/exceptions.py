"""
Custom exceptions for the Hostel Admin API

Every exception carries the HTTP status it is reported with; the handlers
registered in ``hostel_admin.main`` turn them into the JSON error envelope.
"""

class APIException(Exception):
    """Base API exception"""
    status_code = 500

    def __init__(self, message: str = "An error occurred", errors: list = None):
        self.message = message
        self.errors = errors or [{"msg": message}]
        super().__init__(self.message)

class ValidationError(APIException):
    """Raised when request input is missing or malformed"""
    status_code = 400

class ConflictError(APIException):
    """Raised when trying to create a duplicate resource"""
    status_code = 400

class NotFoundError(APIException):
    """Raised when a referenced record does not exist"""
    status_code = 400

class AuthError(APIException):
    """Raised when the caller cannot be authenticated as an admin"""
    status_code = 401

class InternalError(APIException):
    """Raised when a database write or other server-side step fails"""
    status_code = 500
