# telemart/domain/errors.py
"""
Bledy domenowe. Kazdy niesie status HTTP, na ktory zamienia go handler w main.py.
"""


class ServiceError(Exception):
    status_code = 500
    default_message = "Internal server error"

    def __init__(self, message: str | None = None):
        self.message = message or self.default_message
        super().__init__(self.message)


class InvalidInput(ServiceError):
    status_code = 400
    default_message = "Invalid input"


class Conflict(ServiceError):
    status_code = 400
    default_message = "Resource already exists"


class EmptyCart(ServiceError):
    status_code = 400
    default_message = "Cart is empty"


class Unauthenticated(ServiceError):
    status_code = 401
    default_message = "Not logged in"


class InvalidCredentials(ServiceError):
    status_code = 401
    default_message = "Invalid username or password"


class NotFound(ServiceError):
    status_code = 404
    default_message = "Not found"


class DependencyFailure(ServiceError):
    status_code = 500
    default_message = "Service temporarily unavailable"
