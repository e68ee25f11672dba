"""Shared helpers for the sdd-system test suite."""
