"""Command-line entry point for grabber."""
