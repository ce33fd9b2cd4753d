"""JSON-friendly record adapters for the address book.

Each adapter is a pydantic model mirroring a domain entity with nullable,
unchecked fields. ``from_model`` copies a trusted domain object into the
adapter; ``to_model_type`` validates every field and rebuilds the domain
object, failing fast on the first violation.
"""

from typing import ClassVar, TypeVar

from pydantic import BaseModel, ConfigDict, Field, field_validator

from weddingbook.core.errors import DuplicateRecordError, InvalidFormatError, MissingFieldError
from weddingbook.core.models import (
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

ValueT = TypeVar("ValueT", Name, Phone, Email, Address, WeddingName, Venue, Datetime)


def to_value_object(entity: str, raw: str | None, value_type: type[ValueT]) -> ValueT:
    """Convert one persisted field into its validated value object.

    Args:
        entity: Owning entity name used in the missing-field message.
        raw: Persisted value, None when the field was absent.
        value_type: Value object class to construct.

    Raises:
        MissingFieldError: If ``raw`` is None.
        InvalidFormatError: If ``raw`` fails the type's format predicate.
    """
    if raw is None:
        raise MissingFieldError(entity, value_type.__name__)
    if not value_type.is_valid(raw):
        raise InvalidFormatError(value_type.__name__, value_type.MESSAGE_CONSTRAINTS)
    return value_type(raw)


def _none_as_empty(value: list | None) -> list:
    return [] if value is None else value


class _JsonAdapted(BaseModel):
    model_config = ConfigDict(populate_by_name=True, extra="ignore")


class JsonAdaptedPerson(_JsonAdapted):
    """JSON-friendly version of Person."""

    ENTITY: ClassVar[str] = "Person"

    name: str | None = None
    phone: str | None = None
    email: str | None = None
    address: str | None = None
    tags: list[str] = Field(default_factory=list)

    @field_validator("tags", mode="before")
    @classmethod
    def default_tags(cls, v: list | None) -> list:
        return _none_as_empty(v)

    @classmethod
    def from_model(cls, source: Person) -> "JsonAdaptedPerson":
        return cls(
            name=str(source.name),
            phone=str(source.phone),
            email=str(source.email),
            address=str(source.address),
            tags=sorted(str(tag) for tag in source.tags),
        )

    def to_model_type(self) -> Person:
        """Convert this adapted person into the domain Person.

        Raises:
            IllegalValueError: If any field is missing or malformed.
        """
        model_tags = []
        for tag in self.tags:
            if not Tag.is_valid(tag):
                raise InvalidFormatError(Tag.__name__, Tag.MESSAGE_CONSTRAINTS)
            model_tags.append(Tag(tag))

        return Person(
            name=to_value_object(self.ENTITY, self.name, Name),
            phone=to_value_object(self.ENTITY, self.phone, Phone),
            email=to_value_object(self.ENTITY, self.email, Email),
            address=to_value_object(self.ENTITY, self.address, Address),
            tags=frozenset(model_tags),
        )


class JsonAdaptedWedding(_JsonAdapted):
    """JSON-friendly version of Wedding."""

    ENTITY: ClassVar[str] = "Wedding"

    wedding_name: str | None = Field(default=None, alias="weddingName")
    venue: str | None = None
    date_time: str | None = Field(default=None, alias="dateTime")
    participants: list[JsonAdaptedPerson] = Field(default_factory=list)

    @field_validator("participants", mode="before")
    @classmethod
    def default_participants(cls, v: list | None) -> list:
        return _none_as_empty(v)

    @classmethod
    def from_model(cls, source: Wedding) -> "JsonAdaptedWedding":
        participants = sorted(source.participants, key=lambda person: person.name.value)
        return cls(
            wedding_name=str(source.wedding_name),
            venue=str(source.venue),
            date_time=str(source.datetime),
            participants=[JsonAdaptedPerson.from_model(person) for person in participants],
        )

    def to_model_type(self) -> Wedding:
        """Convert this adapted wedding into the domain Wedding.

        Participants are converted before any wedding-level field is
        checked, so an invalid participant is reported first.

        Raises:
            IllegalValueError: If any participant or field is missing or malformed.
        """
        participant_list = [participant.to_model_type() for participant in self.participants]

        model_wedding_name = to_value_object(self.ENTITY, self.wedding_name, WeddingName)
        model_venue = to_value_object(self.ENTITY, self.venue, Venue)
        model_datetime = to_value_object(self.ENTITY, self.date_time, Datetime)

        return Wedding(
            wedding_name=model_wedding_name,
            venue=model_venue,
            datetime=model_datetime,
            participants=frozenset(participant_list),
        )


class JsonSerializableAddressBook(_JsonAdapted):
    """An immutable address book that is serializable to JSON format."""

    MESSAGE_DUPLICATE_PERSON: ClassVar[str] = "Persons list contains duplicate person(s)."
    MESSAGE_DUPLICATE_WEDDING: ClassVar[str] = "Weddings list contains duplicate wedding(s)."

    model_config = ConfigDict(populate_by_name=True, extra="ignore", frozen=True)

    persons: list[JsonAdaptedPerson] = Field(default_factory=list)
    weddings: list[JsonAdaptedWedding] = Field(default_factory=list)

    @field_validator("persons", "weddings", mode="before")
    @classmethod
    def default_lists(cls, v: list | None) -> list:
        return _none_as_empty(v)

    @classmethod
    def from_model(cls, source: AddressBook) -> "JsonSerializableAddressBook":
        return cls(
            persons=[JsonAdaptedPerson.from_model(person) for person in source.persons],
            weddings=[JsonAdaptedWedding.from_model(wedding) for wedding in source.weddings],
        )

    def to_model_type(self) -> AddressBook:
        """Convert this address book into the domain AddressBook.

        Raises:
            IllegalValueError: If any record is invalid or duplicated.
        """
        address_book = AddressBook()
        for json_person in self.persons:
            person = json_person.to_model_type()
            if address_book.has_person(person):
                raise DuplicateRecordError(self.MESSAGE_DUPLICATE_PERSON)
            address_book.add_person(person)

        for json_wedding in self.weddings:
            wedding = json_wedding.to_model_type()
            if address_book.has_wedding(wedding):
                raise DuplicateRecordError(self.MESSAGE_DUPLICATE_WEDDING)
            address_book.add_wedding(wedding)

        return address_book

    def to_json_dict(self) -> dict:
        """Dump using the persisted key names (``weddingName``, ``dateTime``)."""
        return self.model_dump(by_alias=True)
