"""Command line interface for compustore."""
