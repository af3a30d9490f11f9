"""Settings, paths and persistence helpers."""
