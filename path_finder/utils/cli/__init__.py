"""cli utilities package."""
