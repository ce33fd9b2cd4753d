"""Sample contacts used to populate a fresh address book."""

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


def _person(name: str, phone: str, email: str, address: str, *tags: str) -> Person:
    return Person(
        name=Name(name),
        phone=Phone(phone),
        email=Email(email),
        address=Address(address),
        tags=frozenset(Tag(tag) for tag in tags),
    )


def get_sample_persons() -> list[Person]:
    return [
        _person("Alex Yeoh", "87438807", "alexyeoh@example.com",
                "Blk 30 Geylang Street 29, #06-40", "friends"),
        _person("Bernice Yu", "99272758", "berniceyu@example.com",
                "Blk 30 Lorong 3 Serangoon Gardens, #07-18", "colleagues", "friends"),
        _person("Charlotte Oliveiro", "93210283", "charlotte@example.com",
                "Blk 11 Ang Mo Kio Street 74, #11-04", "neighbours"),
        _person("David Li", "91031282", "lidavid@example.com",
                "Blk 436 Serangoon Gardens Street 26, #16-43", "family"),
        _person("Irfan Ibrahim", "92492021", "irfan@example.com",
                "Blk 47 Tampines Street 20, #17-35", "classmates"),
        _person("Roy Balakrishnan", "92624417", "royb@example.com",
                "Blk 45 Aljunied Street 85, #11-31", "colleagues"),
    ]


def get_sample_address_book() -> AddressBook:
    persons = get_sample_persons()
    wedding = Wedding(
        wedding_name=WeddingName("Alex & Bernice"),
        venue=Venue("Raffles Hotel Ballroom"),
        datetime=Datetime("2025-06-14 18:30"),
        participants=frozenset(persons[:2]),
    )
    return AddressBook(persons=persons, weddings=[wedding])
