"""Setup Layer."""
