"""Increments project version numbers and releases them using git."""
