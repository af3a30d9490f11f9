"""Filesystem adapters for the purge feature."""
