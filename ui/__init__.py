"""UI module."""
