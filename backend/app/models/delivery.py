"""Delivery ORM — ships a Sale to an Address.

Invariants:
    - An Address referenced by any Delivery cannot be deleted (checked by the handler,
      FK has no ON DELETE CASCADE)
"""

from datetime import datetime

from sqlalchemy import DateTime, ForeignKey, Integer
from sqlalchemy.orm import Mapped, mapped_column

from app.db.base import Base


class Delivery(Base):
    __tablename__ = "deliveries"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    address_id: Mapped[int] = mapped_column(
        Integer, ForeignKey("addresses.id"), nullable=False,
    )
    sale_id: Mapped[int] = mapped_column(
        Integer, ForeignKey("sales.id"), nullable=False,
    )
    delivery_forecast: Mapped[datetime | None] = mapped_column(
        DateTime(timezone=True), nullable=True,
    )
