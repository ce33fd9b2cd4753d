"""Core domain logic for the weddingbook address book.

This package contains zero external dependencies and represents
the pure business logic of the application. Persistence and the
command line are handled by the adapters package.
"""

from .errors import (
    DataLoadingError,
    DuplicateRecordError,
    ErrorCode,
    IllegalValueError,
    InvalidFormatError,
    MissingFieldError,
    RecordNotFoundError,
)
from .models import (
    Address,
    AddressBook,
    Datetime,
    Email,
    Name,
    Person,
    Phone,
    Tag,
    Venue,
    Wedding,
    WeddingName,
)

__all__ = [
    "Address",
    "AddressBook",
    "DataLoadingError",
    "Datetime",
    "DuplicateRecordError",
    "Email",
    "ErrorCode",
    "IllegalValueError",
    "InvalidFormatError",
    "MissingFieldError",
    "Name",
    "Person",
    "Phone",
    "RecordNotFoundError",
    "Tag",
    "Venue",
    "Wedding",
    "WeddingName",
]
