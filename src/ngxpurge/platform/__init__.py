"""Shared infrastructure: logging, filesystem helpers, persistence and hooks."""
