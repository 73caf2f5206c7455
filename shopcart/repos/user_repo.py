# shopcart/repos/user_repo.py
from typing import Any, Dict, List

from pymongo.database import Database

from shopcart.data.database import USERS
from shopcart.data.models.user import UserModel


class UserRepo:
    def __init__(self, db: Database):
        self.collection = db[USERS]

    def get_by_email(self, email: str) -> UserModel | None:
        doc = self.collection.find_one({"email": email})
        if not doc:
            return None
        return UserModel.from_document(doc)

    def create_user(self, data: Dict[str, Any]) -> UserModel:
        doc = dict(data)
        result = self.collection.insert_one(doc)
        doc["_id"] = result.inserted_id
        return UserModel.from_document(doc)

    def list_users(self) -> List[UserModel]:
        return [UserModel.from_document(d) for d in self.collection.find()]
