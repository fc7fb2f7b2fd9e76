"""Setup layer tests."""
