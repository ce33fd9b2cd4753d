"""Port interfaces for the weddingbook address book.

These abstract base classes define the boundaries between core
domain logic and external adapters. Implementations live in the
adapters/ package.

Port Interface Categories:

1. **Driven Ports** (core calls out to adapters)
   - AddressBookStorePort: Persist and reload the address book

2. **Driving Ports** (adapters call into core)
   - ManagementPort: User-initiated actions (add, delete, list, etc.)
"""

from abc import ABC, abstractmethod
from collections.abc import Sequence

from .models import AddressBook, Person, Wedding


# ============================================================================
# DRIVEN PORTS (Core calls out to adapters)
# ============================================================================


class AddressBookStorePort(ABC):
    """Port for persisting the address book.

    Adapters implementing this port translate between the domain
    AddressBook and a persisted representation (JSON file, SQLite, ...).

    Implementations must handle:
    - Validation of every record on the way back into the domain
    - Reporting unreadable data as DataLoadingError
    """

    @abstractmethod
    async def read(self) -> AddressBook | None:
        """Load the persisted address book.

        Returns:
            The reconstructed AddressBook, or None if nothing has been
            persisted yet.

        Raises:
            DataLoadingError: If persisted data exists but is malformed
                or violates a domain constraint.
        """

    @abstractmethod
    async def save(self, address_book: AddressBook) -> None:
        """Persist the full address book, replacing previous contents.

        Args:
            address_book: AddressBook to persist.

        Raises:
            OSError: If the underlying storage cannot be written.
        """

    @abstractmethod
    async def close(self) -> None:
        """Release any resources held by the store."""


# ============================================================================
# DRIVING PORTS (Adapters call into core)
# ============================================================================


class ManagementPort(ABC):
    """Port for user-initiated address book operations.

    Used by the CLI adapter. All mutations are persisted before the
    call returns.
    """

    @abstractmethod
    async def add_person(self, person: Person) -> None:
        """Add a new person.

        Raises:
            DuplicateRecordError: If a person with the same name exists.
        """

    @abstractmethod
    async def delete_person(self, name: str) -> Person:
        """Delete a person by name and return the removed person.

        Raises:
            RecordNotFoundError: If no person has that name.
        """

    @abstractmethod
    async def list_persons(self) -> Sequence[Person]:
        """Return all persons in insertion order."""

    @abstractmethod
    async def find_persons(self, keywords: Sequence[str]) -> Sequence[Person]:
        """Return persons whose name contains any keyword as a whole word.

        Matching is case-insensitive.
        """

    @abstractmethod
    async def add_wedding(
        self,
        wedding_name: str,
        venue: str,
        datetime: str,
        participant_names: Sequence[str] = (),
    ) -> Wedding:
        """Create a wedding from raw field values.

        Raises:
            InvalidFormatError: If a field violates its constraints.
            RecordNotFoundError: If a participant is not in the address book.
            DuplicateRecordError: If a wedding with the same name exists.
        """

    @abstractmethod
    async def delete_wedding(self, wedding_name: str) -> Wedding:
        """Delete a wedding by name and return the removed wedding.

        Raises:
            RecordNotFoundError: If no wedding has that name.
        """

    @abstractmethod
    async def list_weddings(self) -> Sequence[Wedding]:
        """Return all weddings in insertion order."""

    @abstractmethod
    async def clear(self) -> None:
        """Remove every person and wedding."""
