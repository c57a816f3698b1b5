"""Command-line interface for mgtool."""
