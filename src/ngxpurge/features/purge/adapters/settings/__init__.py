"""Settings store adapters for the purge feature."""
