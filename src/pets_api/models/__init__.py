"""SQLAlchemy models.

Importing this package registers every model on ``Base.metadata``.
"""

from pets_api.models.base import Base
from pets_api.models.pet import Pet
from pets_api.models.user import User

__all__ = ["Base", "Pet", "User"]
