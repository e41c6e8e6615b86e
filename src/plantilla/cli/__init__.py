"""CLI (Typer + Rich)."""
