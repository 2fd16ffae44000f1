"""Core layers of the Ajax command toolkit."""
