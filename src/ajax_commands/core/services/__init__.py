"""Services that render and dispatch Ajax command streams."""
