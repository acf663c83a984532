"""Helpers shared by the search table and the CLI."""
