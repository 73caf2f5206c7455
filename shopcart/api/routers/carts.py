# shopcart/api/routers/carts.py
from fastapi import APIRouter, Depends, HTTPException, Response
from pymongo.database import Database

from shopcart.data.database import get_db
from shopcart.domain.errors import (
    CartBusy,
    CartNotFound,
    InvalidInput,
    ItemNotFound,
    ProductNotFound,
)
from shopcart.domain.schemas import (
    AddItemIn,
    CartOut,
    RemoveItemIn,
    SetQuantityIn,
)
from shopcart.services.cart_service import CartService
from shopcart.services.lock_service import LockService

router = APIRouter(tags=["carts"])


def get_lock_service() -> LockService:
    return LockService()


def get_service(
    db: Database = Depends(get_db),
    lock_service: LockService = Depends(get_lock_service),
) -> CartService:
    return CartService(db=db, lock_service=lock_service)


@router.post("/adicionarItem", response_model=CartOut)
def add_item(payload: AddItemIn, svc: CartService = Depends(get_service)):
    try:
        return svc.add_item(payload.owner_id, payload.product_id, payload.quantity)
    except InvalidInput as e:
        raise HTTPException(status_code=400, detail=e.message)
    except ProductNotFound as e:
        raise HTTPException(status_code=404, detail=e.message)
    except CartBusy as e:
        raise HTTPException(status_code=409, detail=e.message)


@router.post("/removerItem", response_model=CartOut)
def remove_item(payload: RemoveItemIn, svc: CartService = Depends(get_service)):
    try:
        return svc.remove_item(payload.owner_id, payload.product_id)
    except InvalidInput as e:
        raise HTTPException(status_code=400, detail=e.message)
    except CartNotFound as e:
        raise HTTPException(status_code=404, detail=e.message)
    except CartBusy as e:
        raise HTTPException(status_code=409, detail=e.message)


@router.post("/atualizarQuantidade", response_model=CartOut)
def set_quantity(payload: SetQuantityIn, svc: CartService = Depends(get_service)):
    try:
        return svc.set_quantity(payload.owner_id, payload.product_id, payload.quantity)
    except InvalidInput as e:
        raise HTTPException(status_code=400, detail=e.message)
    except (CartNotFound, ItemNotFound) as e:
        raise HTTPException(status_code=404, detail=e.message)
    except CartBusy as e:
        raise HTTPException(status_code=409, detail=e.message)


@router.get("/carrinho/{owner_id}", response_model=CartOut)
def get_cart(owner_id: str, svc: CartService = Depends(get_service)):
    try:
        return svc.get_cart(owner_id)
    except CartNotFound as e:
        raise HTTPException(status_code=404, detail=e.message)


@router.delete("/carrinho/{owner_id}", status_code=204)
def delete_cart(owner_id: str, svc: CartService = Depends(get_service)):
    try:
        svc.delete_cart(owner_id)
    except CartNotFound as e:
        raise HTTPException(status_code=404, detail=e.message)
    except CartBusy as e:
        raise HTTPException(status_code=409, detail=e.message)
    return Response(status_code=204)
