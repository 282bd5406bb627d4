"""Command-line interface for TokenKit."""
