"""Address ORM — delivery destination under a City.

Invariants:
    - cep is stored as exactly 8 digits (normalized before insert)
    - complement is never NULL (empty string when not supplied)
    - street_key is always fold_street(street); it is set whenever street is assigned
    - (street_key, number, cep, city_id) is unique — backs the duplicate-by-value check

Design Decisions:
    - Stored fold key instead of an index on SQL lower(): SQLite and C-locale Postgres
      only fold ASCII, so 'SÃO' and 'São' would otherwise be distinct rows
    - city loaded with selectin: listing always renders city and state
"""

from sqlalchemy import ForeignKey, Integer, String, UniqueConstraint
from sqlalchemy.orm import Mapped, mapped_column, relationship, validates

from app.core.enforce_references import fold_street
from app.db.base import Base


class Address(Base):
    __tablename__ = "addresses"
    __table_args__ = (
        UniqueConstraint(
            "street_key", "number", "cep", "city_id", name="uq_addresses_identity",
        ),
    )

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    street: Mapped[str] = mapped_column(String(255), nullable=False)
    street_key: Mapped[str] = mapped_column(String(255), nullable=False)
    number: Mapped[int] = mapped_column(Integer, nullable=False)
    complement: Mapped[str] = mapped_column(
        String(255), nullable=False, default="",
    )
    cep: Mapped[str] = mapped_column(String(8), nullable=False)
    city_id: Mapped[int] = mapped_column(
        Integer, ForeignKey("cities.id"), nullable=False,
    )

    city: Mapped["City"] = relationship("City", lazy="selectin")

    @validates("street")
    def _sync_street_key(self, key: str, street: str) -> str:
        self.street_key = fold_street(street)
        return street
