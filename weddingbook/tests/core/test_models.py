"""Tests for value objects, Person, Wedding and AddressBook invariants."""

from datetime import datetime

import pytest

from weddingbook.core.errors import (
    DuplicateRecordError,
    ErrorCode,
    InvalidFormatError,
    RecordNotFoundError,
)
from weddingbook.core.models import (
    Address,
    AddressBook,
    Datetime,
    Email,
    Name,
    Phone,
    Tag,
    Venue,
    Wedding,
    WeddingName,
)
from weddingbook.tests.typical import (
    ALICE,
    BENSON,
    CARL,
    GARDEN_WEDDING,
    get_typical_address_book,
    make_person,
)


# ============================================================================
# Value object predicates
# ============================================================================


@pytest.mark.parametrize("value", ["peter jack", "12345", "peter the 2nd", "David Roger Jackson Ray Jr 2nd"])
def test_name_valid(value: str) -> None:
    assert Name.is_valid(value)


@pytest.mark.parametrize("value", ["", " ", "^", "peter*"])
def test_name_invalid(value: str) -> None:
    assert not Name.is_valid(value)


@pytest.mark.parametrize("value", ["911", "93121534", "124293842033123"])
def test_phone_valid(value: str) -> None:
    assert Phone.is_valid(value)


@pytest.mark.parametrize("value", ["", "91", "phone", "9011p041", "9312 1534", "١٢٣"])
def test_phone_invalid(value: str) -> None:
    assert not Phone.is_valid(value)


@pytest.mark.parametrize(
    "value",
    ["PeterJack_1190@example.com", "a@bc", "test@localhost", "a1+be.d@example1.com", "peter_jack@very-very-very-long-example.com"],
)
def test_email_valid(value: str) -> None:
    assert Email.is_valid(value)


@pytest.mark.parametrize(
    "value",
    ["", "@example.com", "peterjackexample.com", "peterjack@", "peterjack@example.c", "-peterjack@example.com", "peterjack@example.com-"],
)
def test_email_invalid(value: str) -> None:
    assert not Email.is_valid(value)


def test_address_and_venue_reject_blank() -> None:
    assert not Address.is_valid("")
    assert not Address.is_valid(" ")
    assert Address.is_valid("Blk 456, Den Road, #01-355")
    assert not Venue.is_valid("  Garden")
    assert Venue.is_valid("Garden")


def test_tag_valid_and_invalid() -> None:
    assert Tag.is_valid("friends")
    assert not Tag.is_valid("best friends")
    assert not Tag.is_valid("")


@pytest.mark.parametrize("value", ["Alice & Bob", "O'Brien-Smith Wedding", "Wedding 2024"])
def test_wedding_name_valid(value: str) -> None:
    assert WeddingName.is_valid(value)


@pytest.mark.parametrize("value", ["", " Alice", "&Bob", "Alice * Bob"])
def test_wedding_name_invalid(value: str) -> None:
    assert not WeddingName.is_valid(value)


@pytest.mark.parametrize("value", ["2024-12-25 18:00", "2024-02-29 00:00"])
def test_datetime_valid(value: str) -> None:
    assert Datetime.is_valid(value)


@pytest.mark.parametrize(
    "value", ["not-a-date", "", "2024-12-25", "2024-13-01 10:00", "2023-02-29 10:00", "2024-12-25 25:00", "2024-12-25T18:00"]
)
def test_datetime_invalid(value: str) -> None:
    assert not Datetime.is_valid(value)


def test_datetime_to_datetime() -> None:
    assert Datetime("2024-12-25 18:00").to_datetime() == datetime(2024, 12, 25, 18, 0)


def test_is_valid_rejects_non_strings() -> None:
    assert not Name.is_valid(None)  # type: ignore[arg-type]
    assert not Datetime.is_valid(20241225)  # type: ignore[arg-type]


def test_constructor_rejects_invalid_value() -> None:
    with pytest.raises(InvalidFormatError) as exc_info:
        Datetime("not-a-date")

    assert exc_info.value.code == ErrorCode.INVALID_FORMAT
    assert exc_info.value.field_name == "Datetime"
    assert str(exc_info.value) == Datetime.MESSAGE_CONSTRAINTS


def test_invalid_format_is_value_error() -> None:
    with pytest.raises(ValueError):
        Phone("12")


def test_value_objects_of_different_types_are_not_equal() -> None:
    assert Venue("Garden") != Address("Garden")
    assert str(Venue("Garden")) == "Garden"


# ============================================================================
# Person and Wedding
# ============================================================================


def test_person_equality_and_hash() -> None:
    copy = make_person("Alice Pauline", "94351253", "alice@example.com",
                       "123, Jurong West Ave 6, #08-111", ("friends",))
    assert copy == ALICE
    assert hash(copy) == hash(ALICE)
    assert len({copy, ALICE}) == 1


def test_is_same_person_compares_names_only() -> None:
    other_phone = make_person("Alice Pauline", phone="11111111")
    assert ALICE.is_same_person(other_phone)
    assert other_phone != ALICE
    assert not ALICE.is_same_person(BENSON)
    assert not ALICE.is_same_person(None)


def test_person_tags_normalized_to_frozenset() -> None:
    person = make_person("Tag Tester")
    assert isinstance(person.tags, frozenset)


def test_wedding_deduplicates_participants() -> None:
    wedding = Wedding(
        wedding_name=WeddingName("Alice & Bob"),
        venue=Venue("Garden"),
        datetime=Datetime("2024-12-25 18:00"),
        participants=[ALICE, ALICE, BENSON],  # type: ignore[arg-type]
    )
    assert wedding.participants == frozenset({ALICE, BENSON})


def test_wedding_equality_ignores_participant_order() -> None:
    reordered = Wedding(
        wedding_name=WeddingName("Alice & Bob"),
        venue=Venue("Garden"),
        datetime=Datetime("2024-12-25 18:00"),
        participants=frozenset([BENSON, ALICE]),
    )
    assert reordered == GARDEN_WEDDING


def test_wedding_is_immutable() -> None:
    with pytest.raises(AttributeError):
        GARDEN_WEDDING.venue = Venue("Hall")  # type: ignore[misc]


def test_without_participant() -> None:
    updated = GARDEN_WEDDING.without_participant(ALICE)
    assert updated.participants == frozenset({BENSON})
    assert GARDEN_WEDDING.participants == frozenset({ALICE, BENSON})


# ============================================================================
# AddressBook
# ============================================================================


def test_add_duplicate_person_rejected() -> None:
    book = AddressBook(persons=[ALICE])
    with pytest.raises(DuplicateRecordError):
        book.add_person(make_person("Alice Pauline", phone="99999999"))


def test_add_duplicate_wedding_rejected() -> None:
    book = AddressBook(weddings=[GARDEN_WEDDING])
    duplicate = Wedding(
        wedding_name=WeddingName("Alice & Bob"),
        venue=Venue("Hall"),
        datetime=Datetime("2025-01-01 12:00"),
    )
    with pytest.raises(DuplicateRecordError):
        book.add_wedding(duplicate)


def test_remove_person_drops_them_from_weddings() -> None:
    book = get_typical_address_book()
    book.remove_person(ALICE)

    assert ALICE not in book.persons
    wedding = book.find_wedding("Alice & Bob")
    assert wedding is not None
    assert wedding.participants == frozenset({BENSON})


def test_remove_missing_person_raises() -> None:
    book = AddressBook(persons=[BENSON])
    with pytest.raises(RecordNotFoundError):
        book.remove_person(CARL)


def test_remove_wedding_and_find() -> None:
    book = get_typical_address_book()
    assert book.find_wedding("Alice & Bob") == GARDEN_WEDDING

    book.remove_wedding(GARDEN_WEDDING)
    assert book.find_wedding("Alice & Bob") is None
    with pytest.raises(RecordNotFoundError):
        book.remove_wedding(GARDEN_WEDDING)


def test_reset_and_equality() -> None:
    book = get_typical_address_book()
    assert book == get_typical_address_book()

    book.reset()
    assert book == AddressBook()
    assert book.persons == ()
    assert book.weddings == ()
