"""Abstract interfaces shared across layers."""
