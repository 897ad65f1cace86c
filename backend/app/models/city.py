"""City ORM — always owned by a State (state_id FK)."""

from sqlalchemy import ForeignKey, Integer, String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from app.db.base import Base


class City(Base):
    __tablename__ = "cities"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    name: Mapped[str] = mapped_column(String(150), nullable=False)
    state_id: Mapped[int] = mapped_column(
        Integer, ForeignKey("states.id"), nullable=False,
    )

    state: Mapped["State"] = relationship(
        "State", back_populates="cities", lazy="selectin",
    )
