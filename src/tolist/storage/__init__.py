"""Blob storage backends (SQLite key-value slot, JSON file)."""
