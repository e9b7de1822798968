"""Command-line interface for json2markdown."""
