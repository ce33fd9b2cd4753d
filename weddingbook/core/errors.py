"""Domain errors for the weddingbook address book.

Validation failures subclass ValueError so that callers catching
ValueError (CLI handlers, the service layer) handle them uniformly.
"""

from enum import Enum


class ErrorCode(Enum):
    """Domain error codes."""

    MISSING_FIELD = "MISSING_FIELD"
    INVALID_FORMAT = "INVALID_FORMAT"
    DUPLICATE_RECORD = "DUPLICATE_RECORD"
    RECORD_NOT_FOUND = "RECORD_NOT_FOUND"


class IllegalValueError(ValueError):
    """Base domain error with code and user-facing message."""

    def __init__(self, code: ErrorCode, message: str) -> None:
        super().__init__(message)
        self.code = code
        self.message = message

    def __str__(self) -> str:
        return self.message


class MissingFieldError(IllegalValueError):
    """Raised when a required field of a persisted record is null."""

    def __init__(self, entity: str, field_name: str) -> None:
        super().__init__(
            code=ErrorCode.MISSING_FIELD,
            message=f"{entity}'s {field_name} field is missing!",
        )
        self.entity = entity
        self.field_name = field_name


class InvalidFormatError(IllegalValueError):
    """Raised when a field is present but violates its format constraints."""

    def __init__(self, field_name: str, constraint_message: str) -> None:
        super().__init__(code=ErrorCode.INVALID_FORMAT, message=constraint_message)
        self.field_name = field_name
        self.constraint_message = constraint_message


class DuplicateRecordError(IllegalValueError):
    """Raised when a record would duplicate one already in the address book."""

    def __init__(self, message: str) -> None:
        super().__init__(code=ErrorCode.DUPLICATE_RECORD, message=message)


class RecordNotFoundError(IllegalValueError):
    """Raised when a named person or wedding does not exist."""

    def __init__(self, message: str) -> None:
        super().__init__(code=ErrorCode.RECORD_NOT_FOUND, message=message)


class DataLoadingError(Exception):
    """Raised by stores when persisted data cannot be read back."""
