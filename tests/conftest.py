"""Pytest configuration and fixtures"""
import copy
import os
from contextlib import contextmanager
from types import SimpleNamespace

import pytest
from bson import ObjectId

# Set test environment variables
os.environ.setdefault("MONGO_URL", "mongodb://localhost:27017")
os.environ.setdefault("MONGO_DB", "shopcart_test")
os.environ.setdefault("REDIS_URL", "redis://localhost:6379/15")
os.environ.setdefault("BCRYPT_ROUNDS", "4")
os.environ.setdefault("CART_LOCK_WAIT_ATTEMPTS", "3")
os.environ.setdefault("CART_LOCK_WAIT_SECONDS", "0")

from fastapi.testclient import TestClient  # noqa: E402

from shopcart.api import create_app  # noqa: E402
from shopcart.api.routers import carts  # noqa: E402
from shopcart.data.database import CARTS, PRODUCTS, get_db  # noqa: E402
from shopcart.domain.errors import CartBusy  # noqa: E402
from shopcart.services.cart_service import CartService  # noqa: E402


class FakeCollection:
    """Subset of pymongo.collection.Collection used by the repos."""

    def __init__(self):
        self.docs = []
        self.indexes = []
        self.writes = 0

    @staticmethod
    def _matches(doc, filter):
        return all(doc.get(k) == v for k, v in (filter or {}).items())

    def find_one(self, filter=None):
        for doc in self.docs:
            if self._matches(doc, filter):
                return copy.deepcopy(doc)
        return None

    def find(self, filter=None):
        return [copy.deepcopy(d) for d in self.docs if self._matches(d, filter)]

    def count_documents(self, filter):
        return len(self.find(filter))

    def insert_one(self, doc):
        doc.setdefault("_id", ObjectId())
        self.docs.append(copy.deepcopy(doc))
        self.writes += 1
        return SimpleNamespace(inserted_id=doc["_id"])

    def replace_one(self, filter, replacement, upsert=False):
        self.writes += 1
        for idx, doc in enumerate(self.docs):
            if self._matches(doc, filter):
                new_doc = copy.deepcopy(replacement)
                new_doc["_id"] = doc["_id"]
                self.docs[idx] = new_doc
                return SimpleNamespace(matched_count=1, upserted_id=None)
        if upsert:
            new_doc = copy.deepcopy(replacement)
            new_doc["_id"] = ObjectId()
            self.docs.append(new_doc)
            return SimpleNamespace(matched_count=0, upserted_id=new_doc["_id"])
        return SimpleNamespace(matched_count=0, upserted_id=None)

    def delete_one(self, filter):
        for idx, doc in enumerate(self.docs):
            if self._matches(doc, filter):
                del self.docs[idx]
                self.writes += 1
                return SimpleNamespace(deleted_count=1)
        return SimpleNamespace(deleted_count=0)

    def create_index(self, keys, **kwargs):
        self.indexes.append((keys, kwargs))
        return kwargs.get("name", "index")


class FakeDatabase:
    def __init__(self):
        self.collections = {}

    def __getitem__(self, name):
        return self.collections.setdefault(name, FakeCollection())


class StubLockService:
    """Records which owners were locked; owners in `busy` raise CartBusy."""

    def __init__(self):
        self.locked = []
        self.busy = set()

    @contextmanager
    def cart_lock(self, owner_id):
        if owner_id in self.busy:
            raise CartBusy()
        self.locked.append(owner_id)
        yield "token"


@pytest.fixture
def fake_db():
    return FakeDatabase()


@pytest.fixture
def lock_service():
    return StubLockService()


@pytest.fixture
def cart_service(fake_db, lock_service):
    return CartService(db=fake_db, lock_service=lock_service)


@pytest.fixture
def carts_collection(fake_db):
    return fake_db[CARTS]


@pytest.fixture
def sample_product(fake_db):
    """Camiseta priced 49.90, returns its id as a string"""
    oid = ObjectId()
    fake_db[PRODUCTS].docs.append(
        {
            "_id": oid,
            "name": "Camiseta",
            "price": 49.90,
            "image_url": "https://example.com/camiseta.jpg",
            "description": "Camiseta de algodão",
        }
    )
    return str(oid)


@pytest.fixture
def second_product(fake_db):
    oid = ObjectId()
    fake_db[PRODUCTS].docs.append(
        {
            "_id": oid,
            "name": "Calça Jeans",
            "price": 99.90,
            "image_url": "https://example.com/calca-jeans.jpg",
            "description": "Calça jeans",
        }
    )
    return str(oid)


@pytest.fixture
def app(fake_db, lock_service):
    app = create_app(with_lifespan=False)
    app.dependency_overrides[get_db] = lambda: fake_db
    app.dependency_overrides[carts.get_lock_service] = lambda: lock_service
    return app


@pytest.fixture
def client(app):
    return TestClient(app)
