"""Address book with wedding tracking."""
