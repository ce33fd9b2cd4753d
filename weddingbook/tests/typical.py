"""Typical persons and weddings shared across tests."""

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


def make_person(
    name: str,
    phone: str = "94351253",
    email: str = "someone@example.com",
    address: str = "123, Jurong West Ave 6, #08-111",
    tags: tuple[str, ...] = (),
) -> Person:
    return Person(
        name=Name(name),
        phone=Phone(phone),
        email=Email(email),
        address=Address(address),
        tags=frozenset(Tag(tag) for tag in tags),
    )


ALICE = make_person("Alice Pauline", "94351253", "alice@example.com",
                    "123, Jurong West Ave 6, #08-111", ("friends",))
BENSON = make_person("Benson Meier", "98765432", "johnd@example.com",
                     "311, Clementi Ave 2, #02-25", ("owesMoney", "friends"))
CARL = make_person("Carl Kurz", "95352563", "heinz@example.com", "wall street")
DANIEL = make_person("Daniel Meier", "87652533", "cornelia@example.com",
                     "10th street", ("friends",))

GARDEN_WEDDING = Wedding(
    wedding_name=WeddingName("Alice & Bob"),
    venue=Venue("Garden"),
    datetime=Datetime("2024-12-25 18:00"),
    participants=frozenset({ALICE, BENSON}),
)
BEACH_WEDDING = Wedding(
    wedding_name=WeddingName("Carl & Dana"),
    venue=Venue("Sentosa Beach"),
    datetime=Datetime("2025-03-01 10:30"),
    participants=frozenset({CARL}),
)


def get_typical_address_book() -> AddressBook:
    return AddressBook(
        persons=[ALICE, BENSON, CARL, DANIEL],
        weddings=[GARDEN_WEDDING, BEACH_WEDDING],
    )
