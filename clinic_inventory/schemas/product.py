"""Product Schemas — read model plus validated create/update inputs.

Invariants:
    - ProductRead prices are floats regardless of how the store returns them
      (Decimal, fixed-point text); stock is always int
    - ProductCreate/ProductUpdate: prices > 0, stock a non-negative integer
    - Create/update inputs are not wired to any route

Design Decisions:
    - field_validator(mode="before") for the Decimal → float step: one conversion
      point, and a bad value fails validation instead of leaking a str
    - ProductUpdate keeps every field optional so partial updates validate the same
      constraints as creation
"""

from datetime import datetime
from decimal import Decimal

from pydantic import BaseModel, ConfigDict, Field, field_validator


class ProductRead(BaseModel):
    """Inventory line item as returned to admin clients."""
    model_config = ConfigDict(from_attributes=True)

    id: int
    name: str
    category: str
    purchase_price: float
    selling_price: float
    stock: int
    created_at: datetime

    @field_validator("purchase_price", "selling_price", mode="before")
    @classmethod
    def normalize_price(cls, v: object) -> object:
        if isinstance(v, (Decimal, str)):
            return float(v)
        return v


class ProductCreate(BaseModel):
    """Product creation input — validates positive prices and stock."""
    name: str = Field(min_length=1)
    category: str
    purchase_price: float = Field(gt=0)
    selling_price: float = Field(gt=0)
    stock: int = Field(ge=0)


class ProductUpdate(BaseModel):
    """Partial product update — same constraints as ProductCreate."""
    id: int
    name: str | None = Field(None, min_length=1)
    category: str | None = None
    purchase_price: float | None = Field(None, gt=0)
    selling_price: float | None = Field(None, gt=0)
    stock: int | None = Field(None, ge=0)
