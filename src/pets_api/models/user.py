"""User model.

A user owns zero or more pets. Deleting a user leaves its pets in place with
their owner reference cleared.
"""

from typing import TYPE_CHECKING, List

from sqlalchemy import String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from pets_api.models.base import Base

if TYPE_CHECKING:
    from pets_api.models.pet import Pet


class User(Base):
    """User record.

    Attributes:
        id: Store-assigned identifier, immutable after creation
        first_name: Given name
        last_name: Family name
        age: Age in years
        pets: Pets owned by the user
    """

    __tablename__ = "users"

    id: Mapped[int] = mapped_column(
        primary_key=True, comment="Unique identifier for the user"
    )

    first_name: Mapped[str] = mapped_column(
        String(100), nullable=False, comment="User's first name"
    )

    last_name: Mapped[str] = mapped_column(
        String(100), nullable=False, comment="User's last name"
    )

    age: Mapped[int] = mapped_column(nullable=False, default=0, comment="Age in years")

    # No delete cascade: removing a user nulls pets.user_id
    pets: Mapped[List["Pet"]] = relationship(
        "Pet", back_populates="owner", lazy="selectin"
    )

    def __repr__(self) -> str:
        """String representation of the User."""
        return (
            f"<User(id={self.id}, first_name='{self.first_name}', "
            f"last_name='{self.last_name}', age={self.age})>"
        )
