"""Command-line interface for FinHealth."""
