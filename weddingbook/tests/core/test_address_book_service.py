"""Tests for AddressBookService against an in-memory store."""

import pytest

from weddingbook.core.address_book_service import AddressBookService
from weddingbook.core.errors import DuplicateRecordError, InvalidFormatError, RecordNotFoundError
from weddingbook.core.models import AddressBook
from weddingbook.core.sample_data import get_sample_address_book
from weddingbook.tests.fakes import FakeAddressBookStorePort
from weddingbook.tests.typical import (
    ALICE,
    BENSON,
    CARL,
    DANIEL,
    get_typical_address_book,
    make_person,
)


@pytest.fixture
def store() -> FakeAddressBookStorePort:
    return FakeAddressBookStorePort(initial=get_typical_address_book())


@pytest.fixture
async def service(store: FakeAddressBookStorePort) -> AddressBookService:
    service = AddressBookService(store=store)
    await service.load()
    return service


# ============================================================================
# load
# ============================================================================


async def test_load_reads_from_store(store: FakeAddressBookStorePort) -> None:
    service = AddressBookService(store=store)
    loaded = await service.load()

    assert loaded == get_typical_address_book()
    assert store.read_call_count == 1


async def test_load_uses_sample_data_when_store_is_empty() -> None:
    service = AddressBookService(store=FakeAddressBookStorePort())
    loaded = await service.load()

    assert loaded == get_sample_address_book()


async def test_load_without_sample_data_starts_empty() -> None:
    service = AddressBookService(store=FakeAddressBookStorePort(), load_sample_data=False)
    assert await service.load() == AddressBook()


async def test_load_failure_starts_empty(caplog: pytest.LogCaptureFixture) -> None:
    store = FakeAddressBookStorePort()
    store.fail_on_read = "Wedding's Venue field is missing!"
    service = AddressBookService(store=store)

    loaded = await service.load()

    assert loaded == AddressBook()
    assert "starting with an empty address book" in caplog.text


# ============================================================================
# persons
# ============================================================================


async def test_add_person_persists(service: AddressBookService, store: FakeAddressBookStorePort) -> None:
    person = make_person("Elle Meyer", "9482224", "werner@example.com", "michegan ave")
    await service.add_person(person)

    assert person in await service.list_persons()
    assert store.stored is not None
    assert person in store.stored.persons


async def test_add_duplicate_person_not_persisted(
    service: AddressBookService, store: FakeAddressBookStorePort
) -> None:
    with pytest.raises(DuplicateRecordError):
        await service.add_person(make_person("Alice Pauline"))
    assert store.saved_snapshots == []


async def test_delete_person(service: AddressBookService, store: FakeAddressBookStorePort) -> None:
    removed = await service.delete_person("Alice Pauline")

    assert removed == ALICE
    assert ALICE not in await service.list_persons()
    weddings = await service.list_weddings()
    assert all(ALICE not in wedding.participants for wedding in weddings)
    assert len(store.saved_snapshots) == 1


async def test_delete_unknown_person(service: AddressBookService) -> None:
    with pytest.raises(RecordNotFoundError, match="Nobody"):
        await service.delete_person("Nobody")


async def test_find_persons_matches_whole_words_case_insensitively(service: AddressBookService) -> None:
    found = await service.find_persons(["meier"])
    assert list(found) == [BENSON, DANIEL]

    assert list(await service.find_persons(["Mei"])) == []
    assert list(await service.find_persons(["kurz", "alice"])) == [ALICE, CARL]


# ============================================================================
# weddings
# ============================================================================


async def test_add_wedding_with_participants(
    service: AddressBookService, store: FakeAddressBookStorePort
) -> None:
    wedding = await service.add_wedding(
        "Daniel & Elle", "Botanic Gardens", "2025-05-05 17:00", ["Daniel Meier", "Carl Kurz"]
    )

    assert wedding.participants == frozenset({DANIEL, CARL})
    assert wedding in await service.list_weddings()
    assert store.stored is not None
    assert wedding in store.stored.weddings


async def test_add_wedding_unknown_participant(service: AddressBookService) -> None:
    with pytest.raises(RecordNotFoundError, match="Participant Zed"):
        await service.add_wedding("Zed Wedding", "Hall", "2025-05-05 17:00", ["Zed"])


async def test_add_wedding_invalid_datetime(service: AddressBookService) -> None:
    with pytest.raises(InvalidFormatError):
        await service.add_wedding("New Wedding", "Hall", "not-a-date")


async def test_add_duplicate_wedding(service: AddressBookService) -> None:
    with pytest.raises(DuplicateRecordError):
        await service.add_wedding("Alice & Bob", "Hall", "2025-05-05 17:00")


async def test_delete_wedding(service: AddressBookService) -> None:
    removed = await service.delete_wedding("Alice & Bob")

    assert str(removed.wedding_name) == "Alice & Bob"
    assert [str(w.wedding_name) for w in await service.list_weddings()] == ["Carl & Dana"]

    with pytest.raises(RecordNotFoundError):
        await service.delete_wedding("Alice & Bob")


async def test_clear(service: AddressBookService, store: FakeAddressBookStorePort) -> None:
    await service.clear()

    assert list(await service.list_persons()) == []
    assert list(await service.list_weddings()) == []
    assert store.stored == AddressBook()
