# shopcart/data/models/product.py
from decimal import Decimal
from typing import Any, Dict

from pydantic import BaseModel

from shopcart.data.models.cart import to_money


class ProductModel(BaseModel):
    id: str
    name: str
    price: Decimal
    image_url: str | None = None
    description: str | None = None

    @classmethod
    def from_document(cls, doc: Dict[str, Any]) -> "ProductModel":
        return cls(
            id=str(doc["_id"]),
            name=doc["name"],
            price=to_money(doc["price"]),
            image_url=doc.get("image_url"),
            description=doc.get("description"),
        )
