"""Pet model."""

from typing import TYPE_CHECKING, Optional

from sqlalchemy import ForeignKey, String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from pets_api.models.base import Base

if TYPE_CHECKING:
    from pets_api.models.user import User


class Pet(Base):
    """Pet record.

    Attributes:
        id: Store-assigned identifier
        name: Pet's name
        animal: Species or category label, e.g. "dog"
        user_id: Owning user, if any
    """

    __tablename__ = "pets"

    id: Mapped[int] = mapped_column(
        primary_key=True, comment="Unique identifier for the pet"
    )

    name: Mapped[str] = mapped_column(String(100), nullable=False, comment="Pet's name")

    animal: Mapped[str] = mapped_column(
        String(100), nullable=False, default="", comment="Species or category label"
    )

    user_id: Mapped[Optional[int]] = mapped_column(
        ForeignKey("users.id", ondelete="SET NULL"),
        nullable=True,
        index=True,
        comment="Owning user",
    )

    owner: Mapped[Optional["User"]] = relationship(
        "User", back_populates="pets", lazy="selectin"
    )

    def __repr__(self) -> str:
        """String representation of the Pet."""
        return (
            f"<Pet(id={self.id}, name='{self.name}', animal='{self.animal}', "
            f"user_id={self.user_id})>"
        )
