"""Request-scoped data models."""
