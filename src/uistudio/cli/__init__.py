"""CLI module for uistudio."""

from .app import app, main

__all__ = ["app", "main"]
