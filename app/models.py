from sqlalchemy import Column, JSON, String
from .db import Base

# -----------------------------
# ORM model for the raw product store.
# Fields are JSON because the incoming values are untrusted and may be
# strings, numbers, arrays or null. Nothing is cleaned on the way in.
# -----------------------------
class RawProduct(Base):
    __tablename__ = "raw_products"
    id         = Column(String, primary_key=True)   # opaque product id
    name       = Column(JSON)
    price      = Column(JSON)                       # number or "19,99"-style string
    stock      = Column(JSON)
    category   = Column(JSON)                       # string, list of strings or null
    updated_at = Column(JSON)                       # meant to be ISO-8601

    def to_raw(self) -> dict:
        return {
            "id": self.id,
            "name": self.name,
            "price": self.price,
            "stock": self.stock,
            "category": self.category,
            "updatedAt": self.updated_at,
        }

    def __repr__(self):
        return f"<RawProduct(id={self.id}, name={self.name!r})>"
