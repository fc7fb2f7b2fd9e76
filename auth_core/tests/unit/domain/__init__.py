"""Domain layer tests."""
