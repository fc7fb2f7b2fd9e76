"""Auth Application."""
