"""Utility packages: events, logging and filesystem helpers."""
