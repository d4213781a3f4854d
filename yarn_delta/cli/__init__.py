"""Command-line interface for yarn-delta."""
