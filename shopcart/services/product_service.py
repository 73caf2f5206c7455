# shopcart/services/product_service.py
from decimal import Decimal
from typing import List

from pymongo.database import Database

from shopcart.data.models.cart import CENTS
from shopcart.data.models.product import ProductModel
from shopcart.domain.errors import InvalidInput
from shopcart.domain.schemas import ProductCreate
from shopcart.repos.product_repo import ProductRepo
from shopcart.utils.logging import get_logger

logger = get_logger(__name__)


class ProductService:
    def __init__(self, db: Database):
        self.repo = ProductRepo(db)

    def create_product(self, payload: ProductCreate) -> ProductModel:
        if not all([payload.name, payload.price, payload.image_url, payload.description]):
            raise InvalidInput("name, price, image_url and description are required")
        if payload.price <= 0:
            raise InvalidInput("price must be greater than zero")
        price = Decimal(str(float(payload.price)))
        if price != price.quantize(CENTS):
            #prices are whole cents, the cart snapshot must not round them
            raise InvalidInput("price must have at most two decimal places")

        created = self.repo.create_product(
            {
                "name": payload.name,
                "price": float(price),
                "image_url": payload.image_url,
                "description": payload.description,
            }
        )
        logger.info(f"Product {created.id} created ({created.name})")
        return created

    def list_products(self) -> List[ProductModel]:
        return self.repo.list_products()
