"""Product ORM — sellable item with a suggested price (> 0, two decimal places)."""

from decimal import Decimal

from sqlalchemy import Integer, Numeric, String
from sqlalchemy.orm import Mapped, mapped_column

from app.db.base import Base


class Product(Base):
    __tablename__ = "products"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    name: Mapped[str] = mapped_column(String(150), nullable=False)
    suggested_price: Mapped[Decimal] = mapped_column(
        Numeric(10, 2), nullable=False,
    )
