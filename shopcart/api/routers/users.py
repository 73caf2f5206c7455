# shopcart/api/routers/users.py
from typing import List

from fastapi import APIRouter, Depends, HTTPException
from pymongo.database import Database

from shopcart.data.database import get_db
from shopcart.domain.errors import EmailAlreadyInUse, InvalidInput
from shopcart.domain.schemas import UserCreate, UserRead
from shopcart.services.user_service import UserService

router = APIRouter(tags=["users"])


@router.post("/adicionarUsuario", response_model=UserRead, status_code=201)
def create_user(payload: UserCreate, db: Database = Depends(get_db)):
    service = UserService(db)
    try:
        return service.create_user(payload)
    except InvalidInput as e:
        raise HTTPException(status_code=400, detail=e.message)
    except EmailAlreadyInUse as e:
        raise HTTPException(status_code=409, detail=e.message)


@router.get("/usuarios", response_model=List[UserRead])
def list_users(db: Database = Depends(get_db)):
    #UserRead has no password field
    return UserService(db).list_users()
