"""Domain models for the weddingbook address book.

All models in this module use only Python standard library types,
ensuring zero external dependencies in the core domain.

Value objects validate themselves on creation, so a Person or Wedding
built from them is internally consistent by construction.
"""

import re
from collections.abc import Iterable
from dataclasses import dataclass, field, replace
from datetime import datetime as dt
from typing import ClassVar

from .errors import DuplicateRecordError, InvalidFormatError, RecordNotFoundError


@dataclass(frozen=True)
class _ValidatedString:
    """Immutable string wrapper that enforces a format invariant."""

    value: str

    MESSAGE_CONSTRAINTS: ClassVar[str] = ""
    PATTERN: ClassVar[re.Pattern[str]] = re.compile(r".*")

    def __post_init__(self) -> None:
        """Reject values that fail the type's format predicate."""
        if not self.is_valid(self.value):
            raise InvalidFormatError(type(self).__name__, self.MESSAGE_CONSTRAINTS)

    @classmethod
    def is_valid(cls, value: str) -> bool:
        """Return True if ``value`` satisfies this type's format predicate."""
        return isinstance(value, str) and cls.PATTERN.fullmatch(value) is not None

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class Name(_ValidatedString):
    """A person's name."""

    MESSAGE_CONSTRAINTS: ClassVar[str] = (
        "Names should only contain alphanumeric characters and spaces, "
        "and it should not be blank"
    )
    PATTERN: ClassVar[re.Pattern[str]] = re.compile(r"[A-Za-z0-9][A-Za-z0-9 ]*")


@dataclass(frozen=True)
class Phone(_ValidatedString):
    """A person's phone number."""

    MESSAGE_CONSTRAINTS: ClassVar[str] = (
        "Phone numbers should only contain numbers, "
        "and it should be at least 3 digits long"
    )
    PATTERN: ClassVar[re.Pattern[str]] = re.compile(r"[0-9]{3,}")


_EMAIL_LOCAL_PART = r"[A-Za-z0-9]+(?:[+_.\-][A-Za-z0-9]+)*"
_EMAIL_DOMAIN_LABEL = r"[A-Za-z0-9]+(?:-[A-Za-z0-9]+)*"
_EMAIL_DOMAIN_LAST_LABEL = r"[A-Za-z0-9]{2,}(?:-[A-Za-z0-9]+)*"


@dataclass(frozen=True)
class Email(_ValidatedString):
    """A person's email address."""

    MESSAGE_CONSTRAINTS: ClassVar[str] = (
        "Emails should be of the format local-part@domain "
        "and adhere to the following constraints:\n"
        "1. The local-part should only contain alphanumeric characters and "
        "these special characters, excluding the parentheses, (+_.-). "
        "The local-part may not start or end with any special characters.\n"
        "2. This is followed by a '@' and then a domain name. The domain name "
        "is made up of domain labels separated by periods.\n"
        "The domain name must:\n"
        "    - end with a domain label at least 2 characters long\n"
        "    - have each domain label start and end with alphanumeric characters\n"
        "    - have each domain label consist of alphanumeric characters, "
        "separated only by hyphens, if any."
    )
    PATTERN: ClassVar[re.Pattern[str]] = re.compile(
        rf"{_EMAIL_LOCAL_PART}@(?:{_EMAIL_DOMAIN_LABEL}\.)*{_EMAIL_DOMAIN_LAST_LABEL}"
    )


@dataclass(frozen=True)
class Address(_ValidatedString):
    """A person's postal address."""

    MESSAGE_CONSTRAINTS: ClassVar[str] = (
        "Addresses can take any values, and it should not be blank"
    )
    PATTERN: ClassVar[re.Pattern[str]] = re.compile(r"[^\s].*", re.DOTALL)


@dataclass(frozen=True)
class Tag(_ValidatedString):
    """A single-word label attached to a person."""

    MESSAGE_CONSTRAINTS: ClassVar[str] = "Tags names should be alphanumeric"
    PATTERN: ClassVar[re.Pattern[str]] = re.compile(r"[A-Za-z0-9]+")


@dataclass(frozen=True)
class WeddingName(_ValidatedString):
    """Identifying name of a wedding, e.g. "Alice & Bob"."""

    MESSAGE_CONSTRAINTS: ClassVar[str] = (
        "Wedding names should only contain alphanumeric characters, spaces "
        "and the symbols & ' -, should start with an alphanumeric character, "
        "and it should not be blank"
    )
    PATTERN: ClassVar[re.Pattern[str]] = re.compile(r"[A-Za-z0-9][A-Za-z0-9 &'\-]*")


@dataclass(frozen=True)
class Venue(_ValidatedString):
    """Where a wedding takes place."""

    MESSAGE_CONSTRAINTS: ClassVar[str] = (
        "Venues can take any values, and it should not be blank"
    )
    PATTERN: ClassVar[re.Pattern[str]] = re.compile(r"[^\s].*", re.DOTALL)


@dataclass(frozen=True)
class Datetime(_ValidatedString):
    """Date and time of a wedding in ``YYYY-MM-DD HH:MM`` form."""

    FORMAT: ClassVar[str] = "%Y-%m-%d %H:%M"
    MESSAGE_CONSTRAINTS: ClassVar[str] = (
        "Datetime should be a valid calendar date and time "
        "in the format YYYY-MM-DD HH:MM, e.g. 2024-12-25 18:00"
    )
    PATTERN: ClassVar[re.Pattern[str]] = re.compile(r"\d{4}-\d{2}-\d{2} \d{2}:\d{2}")

    @classmethod
    def is_valid(cls, value: str) -> bool:
        """Return True if ``value`` is a well-formed, real date and time."""
        if not super().is_valid(value):
            return False
        try:
            dt.strptime(value, cls.FORMAT)
        except ValueError:
            return False
        return True

    def to_datetime(self) -> dt:
        """Parse the stored value into a naive datetime."""
        return dt.strptime(self.value, self.FORMAT)


@dataclass(frozen=True)
class Person:
    """A contact in the address book.

    Hashable so that persons can be collected into sets; equality
    covers every field, while ``is_same_person`` compares names only.
    """

    name: Name
    phone: Phone
    email: Email
    address: Address
    tags: frozenset[Tag] = field(default_factory=frozenset)

    def __post_init__(self) -> None:
        """Normalize tags into a frozenset."""
        if not isinstance(self.tags, frozenset):
            object.__setattr__(self, "tags", frozenset(self.tags))

    def is_same_person(self, other: "Person | None") -> bool:
        """Weaker notion of equality used to detect duplicate contacts."""
        return other is not None and other.name == self.name


@dataclass(frozen=True)
class Wedding:
    """A wedding event and the persons taking part in it."""

    wedding_name: WeddingName
    venue: Venue
    datetime: Datetime
    participants: frozenset[Person] = field(default_factory=frozenset)

    def __post_init__(self) -> None:
        """Collapse participants into a frozenset, dropping duplicates."""
        if not isinstance(self.participants, frozenset):
            object.__setattr__(self, "participants", frozenset(self.participants))

    def is_same_wedding(self, other: "Wedding | None") -> bool:
        """Two weddings are the same if they share a name."""
        return other is not None and other.wedding_name == self.wedding_name

    def without_participant(self, person: Person) -> "Wedding":
        """Return a copy of this wedding with ``person`` removed."""
        return replace(self, participants=self.participants - {person})


class AddressBook:
    """Aggregate of unique persons and unique weddings.

    Persons are unique by name and weddings by wedding name. Insertion
    order is preserved for display and persistence.
    """

    def __init__(
        self,
        persons: Iterable[Person] = (),
        weddings: Iterable[Wedding] = (),
    ) -> None:
        self._persons: list[Person] = []
        self._weddings: list[Wedding] = []
        for person in persons:
            self.add_person(person)
        for wedding in weddings:
            self.add_wedding(wedding)

    @property
    def persons(self) -> tuple[Person, ...]:
        return tuple(self._persons)

    @property
    def weddings(self) -> tuple[Wedding, ...]:
        return tuple(self._weddings)

    def has_person(self, person: Person) -> bool:
        return any(existing.is_same_person(person) for existing in self._persons)

    def add_person(self, person: Person) -> None:
        if self.has_person(person):
            raise DuplicateRecordError("This person already exists in the address book")
        self._persons.append(person)

    def find_person(self, name: str) -> Person | None:
        for person in self._persons:
            if person.name.value == name:
                return person
        return None

    def remove_person(self, person: Person) -> None:
        """Remove a person and drop them from every wedding they attend."""
        if person not in self._persons:
            raise RecordNotFoundError(f"Person {person.name} not found")
        self._persons.remove(person)
        self._weddings = [
            wedding.without_participant(person) if person in wedding.participants else wedding
            for wedding in self._weddings
        ]

    def has_wedding(self, wedding: Wedding) -> bool:
        return any(existing.is_same_wedding(wedding) for existing in self._weddings)

    def add_wedding(self, wedding: Wedding) -> None:
        if self.has_wedding(wedding):
            raise DuplicateRecordError("This wedding already exists in the address book")
        self._weddings.append(wedding)

    def find_wedding(self, wedding_name: str) -> Wedding | None:
        for wedding in self._weddings:
            if wedding.wedding_name.value == wedding_name:
                return wedding
        return None

    def remove_wedding(self, wedding: Wedding) -> None:
        if wedding not in self._weddings:
            raise RecordNotFoundError(f"Wedding {wedding.wedding_name} not found")
        self._weddings.remove(wedding)

    def reset(self) -> None:
        """Remove all persons and weddings."""
        self._persons.clear()
        self._weddings.clear()

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, AddressBook):
            return NotImplemented
        return self._persons == other._persons and self._weddings == other._weddings

    def __repr__(self) -> str:
        return f"AddressBook(persons={len(self._persons)}, weddings={len(self._weddings)})"
