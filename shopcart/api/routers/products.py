# shopcart/api/routers/products.py
from typing import List

from fastapi import APIRouter, Depends, HTTPException
from pymongo.database import Database

from shopcart.data.database import get_db
from shopcart.domain.errors import InvalidInput
from shopcart.domain.schemas import ProductCreate, ProductOut
from shopcart.services.product_service import ProductService

router = APIRouter(tags=["products"])


@router.post("/produtos", response_model=ProductOut, status_code=201)
def create_product(payload: ProductCreate, db: Database = Depends(get_db)):
    service = ProductService(db)
    try:
        return service.create_product(payload)
    except InvalidInput as e:
        raise HTTPException(status_code=400, detail=e.message)


@router.get("/produtos", response_model=List[ProductOut])
def list_products(db: Database = Depends(get_db)):
    return ProductService(db).list_products()
