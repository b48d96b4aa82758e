"""Typer CLI for Carebook."""
