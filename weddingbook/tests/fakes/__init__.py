"""Fake implementations of core ports for testing.

These in-memory implementations allow core domain logic to be tested
without external dependencies:

- FakeAddressBookStorePort: In-memory address book persistence
- FakeManagementPort: Captured management operations
"""

from .management import FakeManagementPort
from .store import FakeAddressBookStorePort

__all__ = [
    "FakeAddressBookStorePort",
    "FakeManagementPort",
]
