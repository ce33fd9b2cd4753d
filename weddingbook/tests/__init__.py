"""Test suite for the weddingbook address book.

Organized into three categories:

1. core/: Unit tests for core domain logic
   - Minimal dependencies, fast execution
   - Uses in-memory fakes for ports

2. adapters/: Tests for adapter implementations
   - JSON record adapters, JSON file store, SQLite store

3. fakes/: Port implementations for testing
   - In-memory implementations of AddressBookStorePort and ManagementPort
"""
