"""Command-line interface for SMART WALLET."""
