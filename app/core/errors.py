"""Error taxonomy shared by the usecase, repository and HTTP layers.

Usecases raise one of the tagged ``AppError`` variants below. The HTTP layer
switches on ``kind`` to pick a status code, never on the message text.
"""
from enum import Enum


class ErrorKind(str, Enum):
    VALIDATION = "VALIDATION"
    NOT_FOUND = "NOT_FOUND"
    INTERNAL = "INTERNAL"


class AppError(Exception):
    kind: ErrorKind = ErrorKind.INTERNAL

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class ValidationError(AppError):
    """Malformed, missing or out-of-range input. Always client-correctable."""
    kind = ErrorKind.VALIDATION


class NotFoundError(AppError):
    """A referenced identifier has no corresponding record."""
    kind = ErrorKind.NOT_FOUND


class InternalError(AppError):
    kind = ErrorKind.INTERNAL


class RecordNotFoundError(Exception):
    """Raised by repositories when a must-exist record is missing."""

    def __init__(self, table: str, record_id: str):
        super().__init__(f"{table} record {record_id} not found")
        self.table = table
        self.record_id = record_id


class DuplicateRecordError(Exception):
    """Raised by repositories when a write hits a unique constraint."""

    def __init__(self, table: str, field: str):
        super().__init__(f"{table} record with this {field} already exists")
        self.table = table
        self.field = field


HTTP_STATUS_BY_KIND = {
    ErrorKind.VALIDATION: 400,
    ErrorKind.NOT_FOUND: 404,
    ErrorKind.INTERNAL: 500,
}
