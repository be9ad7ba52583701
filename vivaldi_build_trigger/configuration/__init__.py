"""Configuration handling for the CLI entry points."""
