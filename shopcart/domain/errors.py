# shopcart/domain/errors.py


class ShopError(Exception):
    """Base class for errors the API reports to the caller."""

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class InvalidInput(ShopError):
    """Missing or malformed required field."""


class ProductNotFound(ShopError):
    def __init__(self, message: str = "Product not found"):
        super().__init__(message)


class CartNotFound(ShopError):
    def __init__(self, message: str = "Cart not found"):
        super().__init__(message)


class ItemNotFound(ShopError):
    def __init__(self, message: str = "Item not found in cart"):
        super().__init__(message)


class CartBusy(ShopError):
    """Another request holds the cart lock for this owner."""

    def __init__(self, message: str = "Cart is being modified by another request"):
        super().__init__(message)


class EmailAlreadyInUse(ShopError):
    def __init__(self, message: str = "This email is already in use"):
        super().__init__(message)
