"""ORM Models — SQLAlchemy declarative models for all domain entities.

Invariants:
    - All models inherit from Base (db/base.py)
    - Address -> City -> State is a strict three-level hierarchy
    - Deletion never cascades from Address to Delivery or from Product to ProductSale

Design Decisions:
    - One file per aggregate for locality
    - All models imported here so SQLAlchemy resolves string-based relationship()
      references before any query runs
"""

from app.models.state import State  # noqa: F401
from app.models.city import City  # noqa: F401
from app.models.address import Address  # noqa: F401
from app.models.product import Product  # noqa: F401
from app.models.permission import Permission  # noqa: F401
from app.models.sale import Sale, ProductSale  # noqa: F401
from app.models.delivery import Delivery  # noqa: F401
