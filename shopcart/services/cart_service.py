# shopcart/services/cart_service.py
from typing import Any

from pymongo.database import Database

from shopcart.data.models.cart import CartItemModel, CartModel
from shopcart.domain.errors import (
    CartNotFound,
    InvalidInput,
    ItemNotFound,
    ProductNotFound,
)
from shopcart.repos.cart_repo import CartRepo
from shopcart.repos.product_repo import ProductRepo
from shopcart.services.lock_service import LockService
from shopcart.utils.logging import get_logger

logger = get_logger(__name__)


def _require_id(value: Any, field: str) -> str:
    if value is None or isinstance(value, bool) or str(value).strip() == "":
        raise InvalidInput(f"{field} is required")
    return str(value)


def _require_int(value: Any, field: str) -> int:
    #bool is an int subclass, but True is not a quantity
    if value is None or isinstance(value, bool) or not isinstance(value, int):
        raise InvalidInput(f"{field} must be an integer")
    return value


class CartService:
    """
    Use cases for the cart domain.
    commands (add, remove, set quantity, delete) run under the owner lock
    and rewrite the whole cart document; query (get) is read only.
    """

    def __init__(self, db: Database, lock_service: LockService):
        self.repo = CartRepo(db)
        self.products = ProductRepo(db)
        self.lock_service = lock_service

    #query - read only
    def get_cart(self, owner_id: str) -> CartModel:
        owner_id = _require_id(owner_id, "owner_id")
        cart = self.repo.get_cart(owner_id)
        if not cart:
            raise CartNotFound()
        return cart

    #commands
    def add_item(self, owner_id: str, product_id: str, quantity: int) -> CartModel:
        owner_id = _require_id(owner_id, "owner_id")
        product_id = _require_id(product_id, "product_id")
        quantity = _require_int(quantity, "quantity")
        if quantity <= 0:
            raise InvalidInput("quantity must be greater than zero")

        product = self.products.get_product(product_id)
        if not product:
            raise ProductNotFound()

        with self.lock_service.cart_lock(owner_id):
            cart = self.repo.get_cart(owner_id) or CartModel(owner_id=owner_id)

            existing = cart.find_item(product_id)
            if existing:
                logger.info(
                    f"Product {product_id} already in cart {owner_id}, quantity "
                    f"{existing.quantity} -> {existing.quantity + quantity}"
                )
                existing.quantity += quantity
            else:
                logger.info(f"Adding product {product_id} x{quantity} to cart {owner_id}")
                #price and name captured at add time, never re-synced with the product
                cart.items.append(
                    CartItemModel(
                        product_id=product_id,
                        quantity=quantity,
                        unit_price=product.price,
                        name=product.name,
                    )
                )

            return self._save(cart)

    def remove_item(self, owner_id: str, product_id: str) -> CartModel:
        owner_id = _require_id(owner_id, "owner_id")
        product_id = _require_id(product_id, "product_id")

        with self.lock_service.cart_lock(owner_id):
            cart = self.repo.get_cart(owner_id)
            if not cart:
                raise CartNotFound()

            before = len(cart.items)
            cart.items = [i for i in cart.items if i.product_id != product_id]
            logger.info(
                f"Removed {before - len(cart.items)} item(s) of product {product_id} "
                f"from cart {owner_id}"
            )

            return self._save(cart)

    def set_quantity(self, owner_id: str, product_id: str, quantity: int) -> CartModel:
        owner_id = _require_id(owner_id, "owner_id")
        product_id = _require_id(product_id, "product_id")
        quantity = _require_int(quantity, "quantity")

        with self.lock_service.cart_lock(owner_id):
            cart = self.repo.get_cart(owner_id)
            if not cart:
                raise CartNotFound()

            item = cart.find_item(product_id)
            if not item:
                raise ItemNotFound()

            if quantity > 0:
                logger.info(f"Setting product {product_id} in cart {owner_id} to {quantity}")
                item.quantity = quantity
            else:
                #zero or less removes the item
                logger.info(f"Quantity {quantity} removes product {product_id} from cart {owner_id}")
                cart.items = [i for i in cart.items if i.product_id != product_id]

            return self._save(cart)

    def delete_cart(self, owner_id: str) -> None:
        owner_id = _require_id(owner_id, "owner_id")

        with self.lock_service.cart_lock(owner_id):
            if not self.repo.delete_cart(owner_id):
                raise CartNotFound()

        logger.info(f"Cart {owner_id} deleted")

    def _save(self, cart: CartModel) -> CartModel:
        cart.recompute_total()
        cart.touch()
        return self.repo.save_cart(cart)
