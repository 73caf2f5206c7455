#document models for the mongo collections

from shopcart.data.models.cart import CartModel, CartItemModel
from shopcart.data.models.product import ProductModel
from shopcart.data.models.user import UserModel

__all__ = ["CartModel", "CartItemModel", "ProductModel", "UserModel"]
