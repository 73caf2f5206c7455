# shopcart/data/models/cart.py
from datetime import datetime, timezone
from decimal import Decimal, ROUND_HALF_UP
from typing import Any, Dict, List

from pydantic import BaseModel, Field

CENTS = Decimal("0.01")


def to_money(value: Any) -> Decimal:
    #float -> str -> Decimal so that 49.9 does not become 49.899999...
    return Decimal(str(value)).quantize(CENTS, rounding=ROUND_HALF_UP)


class CartItemModel(BaseModel):
    product_id: str
    quantity: int
    unit_price: Decimal
    name: str

    @property
    def subtotal(self) -> Decimal:
        return self.unit_price * self.quantity


class CartModel(BaseModel):
    """
    Whole cart document, keyed by owner_id.

    Services mutate a local copy and write the entire document back, so
    total must be recomputed before every save.
    """

    owner_id: str
    items: List[CartItemModel] = Field(default_factory=list)
    updated_at: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))
    total: Decimal = Decimal("0.00")

    def find_item(self, product_id: str) -> CartItemModel | None:
        for item in self.items:
            if item.product_id == product_id:
                return item
        return None

    def recompute_total(self) -> Decimal:
        self.total = sum((i.subtotal for i in self.items), Decimal("0.00")).quantize(
            CENTS, rounding=ROUND_HALF_UP
        )
        return self.total

    def touch(self) -> None:
        self.updated_at = datetime.now(timezone.utc)

    def to_document(self) -> Dict[str, Any]:
        return {
            "owner_id": self.owner_id,
            "items": [
                {
                    "product_id": i.product_id,
                    "quantity": i.quantity,
                    "unit_price": float(i.unit_price),
                    "name": i.name,
                }
                for i in self.items
            ],
            "updated_at": self.updated_at,
            "total": float(self.total),
        }

    @classmethod
    def from_document(cls, doc: Dict[str, Any]) -> "CartModel":
        return cls(
            owner_id=str(doc["owner_id"]),
            items=[
                CartItemModel(
                    product_id=str(i["product_id"]),
                    quantity=int(i["quantity"]),
                    unit_price=to_money(i["unit_price"]),
                    name=i.get("name", ""),
                )
                for i in doc.get("items") or []
            ],
            updated_at=doc.get("updated_at") or datetime.now(timezone.utc),
            total=to_money(doc.get("total", 0)),
        )
