# shopcart/services/user_service.py
from datetime import datetime, timezone
from typing import List

import bcrypt
from pymongo.database import Database
from pymongo.errors import DuplicateKeyError

from shopcart.data.models.user import UserModel
from shopcart.domain.errors import EmailAlreadyInUse, InvalidInput
from shopcart.domain.schemas import UserCreate
from shopcart.repos.user_repo import UserRepo
from shopcart.utils.settings import BCRYPT_ROUNDS
from shopcart.utils.logging import get_logger

logger = get_logger(__name__)

MIN_PASSWORD_LENGTH = 6

def hash_password(password: str) -> str:
    password_bytes = password.encode("utf-8")
    #bcrypt only uses the first 72 bytes
    if len(password_bytes) > 72:
        password_bytes = password_bytes[:72]
    salt = bcrypt.gensalt(rounds=BCRYPT_ROUNDS)
    return bcrypt.hashpw(password_bytes, salt).decode("utf-8")


class UserService:
    def __init__(self, db: Database):
        self.repo = UserRepo(db)

    def create_user(self, payload: UserCreate) -> UserModel:
        if not payload.name or not payload.age or not payload.email or not payload.password:
            raise InvalidInput("name, age, email and password are required")
        if len(payload.password) < MIN_PASSWORD_LENGTH:
            raise InvalidInput(f"Password must have at least {MIN_PASSWORD_LENGTH} characters")
        if "@" not in payload.email or "." not in payload.email:
            raise InvalidInput("Invalid email")

        if self.repo.get_by_email(payload.email):
            raise EmailAlreadyInUse()

        try:
            created = self.repo.create_user(
                {
                    "name": payload.name,
                    "age": payload.age,
                    "email": payload.email,
                    "password_hash": hash_password(payload.password),
                    "created_at": datetime.now(timezone.utc),
                }
            )
        except DuplicateKeyError:
            #unique email index caught a race between find and insert
            raise EmailAlreadyInUse()

        logger.info(f"User {created.id} created")
        return created

    def list_users(self) -> List[UserModel]:
        return self.repo.list_users()
