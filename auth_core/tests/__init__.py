"""auth_core tests."""
