"""Domain errors raised by validators, routes and services.

Every error carries an HTTP status code, a human readable message and,
optionally, the name of the offending field. The translator in
``app.utils.error_handlers`` turns them into the error envelope.
"""


class AppError(Exception):
    status_code = 500

    def __init__(self, message: str, field: str = None, status_code: int = None):
        super().__init__(message)
        self.message = message
        self.field = field
        if status_code is not None:
            self.status_code = status_code

    @property
    def errors(self):
        if self.field is None:
            return None
        return [{"field": self.field, "message": self.message}]


class RequestValidationError(AppError):
    """Malformed, missing or out-of-range request input"""

    status_code = 400

    def __init__(self, message: str = "Validation Error", errors: list = None):
        super().__init__(message)
        self._errors = errors

    @property
    def errors(self):
        return self._errors


class BadRequestError(AppError):
    status_code = 400


class NotFoundError(AppError):
    status_code = 404


class ConflictError(AppError):
    status_code = 409


class InternalError(AppError):
    status_code = 500

    def __init__(self, message: str = "Internal server error"):
        super().__init__(message)
