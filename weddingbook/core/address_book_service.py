"""Address book service: implements ManagementPort for user-initiated operations.

This core service owns the in-memory AddressBook, applies changes to it,
and persists every mutation through the configured store. All state
changes are logged for audit.
"""

import logging
from collections.abc import Sequence

from .errors import DataLoadingError, RecordNotFoundError
from .models import AddressBook, Datetime, Person, Venue, Wedding, WeddingName
from .ports import AddressBookStorePort, ManagementPort
from .sample_data import get_sample_address_book

logger = logging.getLogger(__name__)


class AddressBookService(ManagementPort):
    """Core implementation of ManagementPort.

    Call ``load()`` once before issuing commands.
    """

    def __init__(self, store: AddressBookStorePort, load_sample_data: bool = True):
        """Initialize the address book service.

        Args:
            store: AddressBookStorePort implementation for persistence.
            load_sample_data: Start from sample contacts when the store
                has nothing persisted yet.
        """
        self.store = store
        self.load_sample_data = load_sample_data
        self.address_book = AddressBook()

    async def load(self) -> AddressBook:
        """Load the address book from the store.

        Falls back to sample data when nothing is persisted, and to an
        empty address book when the persisted data cannot be read.
        """
        try:
            loaded = await self.store.read()
        except DataLoadingError as e:
            logger.warning(
                f"Data file could not be loaded, starting with an empty address book: {e}"
            )
            loaded = AddressBook()
        else:
            if loaded is None:
                if self.load_sample_data:
                    logger.info("No data file found, starting with sample address book")
                    loaded = get_sample_address_book()
                else:
                    loaded = AddressBook()

        self.address_book = loaded
        logger.info(
            f"Address book loaded with {len(loaded.persons)} persons "
            f"and {len(loaded.weddings)} weddings"
        )
        return loaded

    async def add_person(self, person: Person) -> None:
        self.address_book.add_person(person)
        await self.store.save(self.address_book)

        logger.info(
            f"Person {person.name} added",
            extra={"person_name": person.name.value},
        )

    async def delete_person(self, name: str) -> Person:
        person = self.address_book.find_person(name)
        if person is None:
            raise RecordNotFoundError(f"Person {name} not found")

        self.address_book.remove_person(person)
        await self.store.save(self.address_book)

        logger.info(f"Person {name} deleted", extra={"person_name": name})
        return person

    async def list_persons(self) -> Sequence[Person]:
        return self.address_book.persons

    async def find_persons(self, keywords: Sequence[str]) -> Sequence[Person]:
        wanted = {keyword.lower() for keyword in keywords if keyword.strip()}
        return [
            person
            for person in self.address_book.persons
            if wanted.intersection(word.lower() for word in person.name.value.split())
        ]

    async def add_wedding(
        self,
        wedding_name: str,
        venue: str,
        datetime: str,
        participant_names: Sequence[str] = (),
    ) -> Wedding:
        participants = []
        for name in participant_names:
            person = self.address_book.find_person(name)
            if person is None:
                raise RecordNotFoundError(f"Participant {name} not found in the address book")
            participants.append(person)

        wedding = Wedding(
            wedding_name=WeddingName(wedding_name),
            venue=Venue(venue),
            datetime=Datetime(datetime),
            participants=frozenset(participants),
        )
        self.address_book.add_wedding(wedding)
        await self.store.save(self.address_book)

        logger.info(
            f"Wedding {wedding_name} added",
            extra={
                "wedding_name": wedding_name,
                "participant_count": len(wedding.participants),
            },
        )
        return wedding

    async def delete_wedding(self, wedding_name: str) -> Wedding:
        wedding = self.address_book.find_wedding(wedding_name)
        if wedding is None:
            raise RecordNotFoundError(f"Wedding {wedding_name} not found")

        self.address_book.remove_wedding(wedding)
        await self.store.save(self.address_book)

        logger.info(f"Wedding {wedding_name} deleted", extra={"wedding_name": wedding_name})
        return wedding

    async def list_weddings(self) -> Sequence[Wedding]:
        return self.address_book.weddings

    async def clear(self) -> None:
        self.address_book.reset()
        await self.store.save(self.address_book)
        logger.info("Address book cleared")
