"""Application layer (use cases)."""
