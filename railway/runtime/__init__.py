"""Railway runtime implementations."""
