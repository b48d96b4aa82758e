"""Command parsing, objects, and dispatch."""
