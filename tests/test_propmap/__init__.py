"""Tests for the propmap package."""
