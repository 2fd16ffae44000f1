"""Domain models for Ajax commands and responses."""
