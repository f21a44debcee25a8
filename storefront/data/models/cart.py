#storefront/data/models/cart.py
import uuid
from datetime import datetime, timezone

from sqlalchemy import Column, Integer, String, DateTime, JSON

from storefront.data.database import Base


def generate_cart_id() -> str:
    return uuid.uuid4().hex


class CartModel(Base):
    __tablename__ = "carts"

    id = Column(String(32), primary_key=True, default=generate_cart_id)
    #jeden token urzadzenia = max jeden koszyk
    device_identifier = Column(String(64), nullable=False, unique=True, index=True)

    #lista {product_id, size, color} w kolejnosci dodania
    products = Column(JSON, nullable=False, default=list)

    version = Column(Integer, nullable=False, default=1)
    created_at = Column(DateTime(timezone=True), nullable=False, default=lambda: datetime.now(timezone.utc))
    updated_at = Column(DateTime(timezone=True), nullable=False, default=lambda: datetime.now(timezone.utc))
