"""External adapters for the weddingbook address book.

This package contains all external dependencies (pydantic, aiosqlite, the
terminal) and provides implementations of the core port interfaces.

Adapter Organization:

- store/: Adapters for address book persistence (JSON file, SQLite)
- cli/: Command-line interface and management commands
"""
