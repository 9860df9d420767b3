"""Core infrastructure: configuration, logging and small helpers."""
