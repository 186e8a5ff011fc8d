"""API routers."""

from pets_api.api.routes import health, pets, users

__all__ = ["health", "pets", "users"]
