# shopcart/data/models/user.py
from datetime import datetime
from typing import Any, Dict

from pydantic import BaseModel


class UserModel(BaseModel):
    id: str
    name: str
    age: int
    email: str
    created_at: datetime | None = None

    @classmethod
    def from_document(cls, doc: Dict[str, Any]) -> "UserModel":
        # password_hash never leaves the repo layer
        return cls(
            id=str(doc["_id"]),
            name=doc["name"],
            age=int(doc["age"]),
            email=doc["email"],
            created_at=doc.get("created_at"),
        )
