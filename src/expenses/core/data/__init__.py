"""Bundled reference data (ISO 4217 currency table)."""
