"""JSON file address book store.

Implements AddressBookStorePort on top of a single UTF-8 JSON file.
File I/O runs in a worker thread so the event loop is never blocked.
"""

import asyncio
import json
import logging
from pathlib import Path

from pydantic import ValidationError

from weddingbook.core.errors import DataLoadingError, IllegalValueError
from weddingbook.core.models import AddressBook
from weddingbook.core.ports import AddressBookStorePort

from .json_adapted import JsonSerializableAddressBook

logger = logging.getLogger(__name__)


class JsonAddressBookStore(AddressBookStorePort):
    """Address book persisted as ``{"persons": [...], "weddings": [...]}``."""

    def __init__(self, file_path: str | Path):
        """Initialize the JSON store.

        Args:
            file_path: Path of the JSON data file. Parent directories are
                created on first save.
        """
        self.file_path = Path(file_path)

    async def read(self) -> AddressBook | None:
        """Load the address book, or None if the data file does not exist."""
        return await asyncio.to_thread(self._read_sync)

    async def save(self, address_book: AddressBook) -> None:
        """Write the full address book to the data file."""
        await asyncio.to_thread(self._save_sync, address_book)

    async def close(self) -> None:
        """Nothing to release for a plain file."""

    def _read_sync(self) -> AddressBook | None:
        if not self.file_path.exists():
            logger.info(f"Data file {self.file_path} not found")
            return None

        try:
            data = json.loads(self.file_path.read_text(encoding="utf-8"))
            serializable = JsonSerializableAddressBook.model_validate(data)
            return serializable.to_model_type()
        except (OSError, UnicodeDecodeError) as e:
            logger.error(f"Could not read data file {self.file_path}: {e}")
            raise DataLoadingError(f"Unreadable data file {self.file_path}: {e}") from e
        except json.JSONDecodeError as e:
            logger.error(f"Data file {self.file_path} is not valid JSON: {e}")
            raise DataLoadingError(f"Malformed JSON in {self.file_path}: {e}") from e
        except ValidationError as e:
            logger.error(f"Data file {self.file_path} has an unexpected shape: {e}")
            raise DataLoadingError(f"Unexpected data shape in {self.file_path}: {e}") from e
        except IllegalValueError as e:
            logger.error(f"Illegal values found in {self.file_path}: {e}")
            raise DataLoadingError(str(e)) from e

    def _save_sync(self, address_book: AddressBook) -> None:
        self.file_path.parent.mkdir(parents=True, exist_ok=True)
        serializable = JsonSerializableAddressBook.from_model(address_book)
        self.file_path.write_text(
            json.dumps(serializable.to_json_dict(), indent=4, ensure_ascii=False),
            encoding="utf-8",
        )
