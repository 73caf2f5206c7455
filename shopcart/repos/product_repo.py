# shopcart/repos/product_repo.py
from typing import Any, Dict, List

from bson import ObjectId
from bson.errors import InvalidId
from pymongo.database import Database

from shopcart.data.database import PRODUCTS
from shopcart.data.models.product import ProductModel
from shopcart.domain.errors import InvalidInput


class ProductRepo:
    def __init__(self, db: Database):
        self.collection = db[PRODUCTS]

    def get_product(self, product_id: str) -> ProductModel | None:
        try:
            oid = ObjectId(product_id)
        except (InvalidId, TypeError):
            raise InvalidInput("Invalid product_id format")

        doc = self.collection.find_one({"_id": oid})
        if not doc:
            return None
        return ProductModel.from_document(doc)

    def create_product(self, data: Dict[str, Any]) -> ProductModel:
        doc = dict(data)
        result = self.collection.insert_one(doc)
        doc["_id"] = result.inserted_id
        return ProductModel.from_document(doc)

    def list_products(self) -> List[ProductModel]:
        return [ProductModel.from_document(d) for d in self.collection.find()]

    def count(self) -> int:
        return self.collection.count_documents({})
