"""Grouped CLI commands."""
