"""Integration tests against a real SQLite database."""
