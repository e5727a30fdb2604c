class ServiceError(Exception):
    """Base for errors raised by the quiz services.

    ``status_code`` is the HTTP status the API layer answers with.
    """
    status_code = 500

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class ValidationError(ServiceError):
    status_code = 400


class NotFoundError(ServiceError):
    status_code = 404


class InactiveSessionError(ServiceError):
    status_code = 409
