"""Domain layer for Radio Orbit."""
