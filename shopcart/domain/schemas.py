# shopcart/domain/schemas.py
from datetime import datetime
from decimal import Decimal
from typing import Annotated, List

from pydantic import BaseModel, ConfigDict, Field, PlainSerializer, StrictInt

#amounts are Decimal in python, plain numbers in JSON
Money = Annotated[Decimal, PlainSerializer(float, return_type=float, when_used="json")]


class AddItemIn(BaseModel):
    """Body of POST /adicionarItem."""

    model_config = ConfigDict(coerce_numbers_to_str=True)

    owner_id: str | None = Field(None, description="Cart owner (user id)")
    product_id: str | None = Field(None, description="Product id")
    #StrictInt: JSON true/false and "2" are rejected, not coerced
    quantity: StrictInt | None = Field(None, description="Quantity to add (must be > 0)")


class RemoveItemIn(BaseModel):
    """Body of POST /removerItem."""

    model_config = ConfigDict(coerce_numbers_to_str=True)

    owner_id: str | None = None
    product_id: str | None = None


class SetQuantityIn(BaseModel):
    """Body of POST /atualizarQuantidade. Zero or less removes the item."""

    model_config = ConfigDict(coerce_numbers_to_str=True)

    owner_id: str | None = None
    product_id: str | None = None
    quantity: StrictInt | None = None


class CartItemOut(BaseModel):
    product_id: str
    quantity: int
    unit_price: Money
    name: str

    model_config = ConfigDict(from_attributes=True)


class CartOut(BaseModel):
    owner_id: str
    items: List[CartItemOut]
    updated_at: datetime
    total: Money

    model_config = ConfigDict(from_attributes=True)


class ProductCreate(BaseModel):
    name: str | None = None
    price: Decimal | None = None
    image_url: str | None = None
    description: str | None = None


class ProductOut(BaseModel):
    id: str
    name: str
    price: Money
    image_url: str | None = None
    description: str | None = None

    model_config = ConfigDict(from_attributes=True)


class UserCreate(BaseModel):
    name: str | None = None
    age: int | None = None
    email: str | None = None
    password: str | None = Field(None, description="Plain password, stored as a bcrypt hash")


class UserRead(BaseModel):
    id: str
    name: str
    age: int
    email: str
    created_at: datetime | None = None

    model_config = ConfigDict(from_attributes=True)
