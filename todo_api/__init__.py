"""Minimal todo item API over an in-memory store."""

__version__ = "1.0.0"
