"""Command-line interface for serialedit."""
