"""Tests for adapter implementations.

These tests exercise the record adapters and stores against real files
to validate translation between core domain models and persisted formats.
"""
