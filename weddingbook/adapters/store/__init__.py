"""Address book store adapters for persistence.

Implementations support multiple backends:
- JSON file (default, human-editable)
- SQLite (single-file database)
"""
