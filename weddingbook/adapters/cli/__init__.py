"""Command-line interface adapters.

Provides CLI commands for managing the address book:
- add / delete / list / find: Manage persons
- wedding / unwedding / weddings: Manage weddings
- clear: Empty the address book
- tag: Reserved, not implemented yet
"""
