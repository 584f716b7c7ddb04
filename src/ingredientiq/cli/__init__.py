"""Command-line interface for IngredientIQ."""

from .app import app, main

__all__ = ["app", "main"]
