"""propmap test suite."""
