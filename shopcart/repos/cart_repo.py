# shopcart/repos/cart_repo.py
from pymongo.database import Database

from shopcart.data.database import CARTS
from shopcart.data.models.cart import CartModel


class CartRepo:
    def __init__(self, db: Database):
        self.collection = db[CARTS]

    def get_cart(self, owner_id: str) -> CartModel | None:
        doc = self.collection.find_one({"owner_id": owner_id})
        if not doc:
            return None
        return CartModel.from_document(doc)

    def save_cart(self, cart: CartModel) -> CartModel:
        #whole document replaced, upsert creates it on first save
        self.collection.replace_one(
            {"owner_id": cart.owner_id},
            cart.to_document(),
            upsert=True,
        )
        return cart

    def delete_cart(self, owner_id: str) -> bool:
        result = self.collection.delete_one({"owner_id": owner_id})
        return result.deleted_count > 0
