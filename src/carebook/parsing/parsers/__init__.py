"""Per-command argument parsers."""
