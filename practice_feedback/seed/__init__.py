"""Seed data shipped with the package (question catalog)."""
