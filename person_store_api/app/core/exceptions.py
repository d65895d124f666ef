"""
Error taxonomy for the PersonStore service.

Business logic raises these exceptions instead of building HTTP
responses.  Each class carries the status code and default message
used by the exception handler registered in ``main.create_app``,
which turns any ``PersonStoreError`` into a plain‑text response.
"""

from typing import Optional


class PersonStoreError(Exception):
    """Base class for every error the service reports to clients."""

    status_code: int = 500
    default_message: str = "Internal server error"

    def __init__(self, message: Optional[str] = None) -> None:
        self.message = message or self.default_message
        super().__init__(self.message)


class ValidationError(PersonStoreError):
    """The request body failed one of the person field rules."""

    status_code = 400
    default_message = "Invalid person data"

    def __init__(self, message: Optional[str] = None, field: Optional[str] = None) -> None:
        super().__init__(message)
        self.field = field


class NotFoundError(PersonStoreError):
    status_code = 404
    default_message = "The person with the provided SSN could not be found"


class ConflictError(PersonStoreError):
    """Duplicate SSN on create, or an attempt to change the SSN on update."""

    status_code = 400
    default_message = "A person with the given SSN is already registered"


class MalformedRequestError(PersonStoreError):
    status_code = 400
    default_message = "Malformed JSON in request body"


class InternalError(PersonStoreError):
    status_code = 500
    default_message = "Internal server error"
