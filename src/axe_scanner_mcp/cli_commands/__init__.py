"""Typer command modules registered on the shared CLI apps."""
