"""Product ORM — persists one clinic inventory line item.

Invariants:
    - purchase_price and selling_price are NUMERIC(10,2): the driver returns Decimal
    - stock is a non-nullable integer
    - created_at set once by the database

Design Decisions:
    - Numeric over Float for money: exact cents in storage, conversion to float
      happens once at the API boundary (schemas/product.py)
"""

from datetime import datetime
from decimal import Decimal

from sqlalchemy import Integer, Numeric, Text, DateTime, func
from sqlalchemy.orm import Mapped, mapped_column

from clinic_inventory.db.base import Base


class Product(Base):
    """Product entity — name, category, prices and stock level."""
    __tablename__ = "products"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    name: Mapped[str] = mapped_column(Text, nullable=False)
    category: Mapped[str] = mapped_column(Text, nullable=False)
    purchase_price: Mapped[Decimal] = mapped_column(
        Numeric(10, 2), nullable=False,
    )
    selling_price: Mapped[Decimal] = mapped_column(
        Numeric(10, 2), nullable=False,
    )
    stock: Mapped[int] = mapped_column(Integer, nullable=False)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        server_default=func.now(),
    )
