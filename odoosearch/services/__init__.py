"""Shared services: queries, incremental search and notifications."""
