from enum import Enum
from typing import List, Optional


class ErrorKind(str, Enum):
    malformed_request = "malformed_request"
    validation = "validation"
    unauthorized = "unauthorized"
    forbidden = "forbidden"
    not_found = "not_found"
    conflict = "conflict"
    internal = "internal"


class ServiceError(Exception):
    """
    Base error raised by services and auth dependencies.

    Carries a machine readable ``kind`` plus the human readable messages that
    end up in the ``errors`` list of the response envelope. Mapping the kind
    to an HTTP status is left to the presentation layer.
    """

    kind: ErrorKind = ErrorKind.internal
    default_message: str = "Internal Server Error"

    def __init__(self, *errors: str, message: Optional[str] = None):
        self.errors: List[str] = list(errors)
        self.message = message or self.default_message
        super().__init__(self.errors[0] if self.errors else self.message)


class ValidationFailedError(ServiceError):
    kind = ErrorKind.validation
    default_message = "Validation failed"


class UnauthorizedError(ServiceError):
    kind = ErrorKind.unauthorized
    default_message = "Unauthorized"


class ForbiddenError(ServiceError):
    kind = ErrorKind.forbidden
    default_message = "Forbidden"


class NotFoundError(ServiceError):
    kind = ErrorKind.not_found
    default_message = "Not found"


class ConflictError(ServiceError):
    kind = ErrorKind.conflict
    default_message = "Conflict"


class InternalError(ServiceError):
    kind = ErrorKind.internal
