"""Pets API: CRUD endpoints for users and the pets they own."""

__version__ = "0.1.0"
