"""Sample table data bundled for the CLI and tests."""
