"""Command-line entry point and the interactive session."""
