"""Feature packages for ngxpurge."""
