"""Base model class for all database models."""

from sqlalchemy.orm import DeclarativeBase


class Base(DeclarativeBase):
    """Base class for all database models.

    Provides common configuration and type annotation support
    for SQLAlchemy 2.0+ models.
    """
