"""ORM Models — SQLAlchemy declarative models for users and products.

Invariants:
    - All models inherit from Base (db/base.py)
    - The core never writes through these models; rows are created out-of-band

Design Decisions:
    - One file per entity for locality
    - All models imported here so Base.metadata is complete before create_all
      or Alembic autogenerate runs
"""

from clinic_inventory.models.user import User  # noqa: F401
from clinic_inventory.models.product import Product  # noqa: F401
