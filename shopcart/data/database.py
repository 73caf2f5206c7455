# shopcart/data/database.py
from pymongo import ASCENDING, MongoClient
from pymongo.database import Database

from shopcart.utils.settings import MONGO_DB, MONGO_TIMEOUT_MS, MONGO_URL
from shopcart.utils.logging import get_logger

logger = get_logger(__name__)

PRODUCTS = "produtos"
USERS = "usuarios"
CARTS = "carrinhos"

#MongoClient connects lazily, on the first query
client = MongoClient(
    MONGO_URL,
    tz_aware=True,
    serverSelectionTimeoutMS=MONGO_TIMEOUT_MS,
)


def get_database() -> Database:
    return client[MONGO_DB]


def get_db():
    yield get_database()


def ensure_indexes(db: Database) -> None:
    """
    One cart per owner and one account per email are enforced by the store,
    not only by the services.
    """
    db[CARTS].create_index([("owner_id", ASCENDING)], unique=True, name="u_cart_owner")
    db[USERS].create_index([("email", ASCENDING)], unique=True, name="u_user_email")
    logger.info(f"Indexes ensured on {CARTS} and {USERS}")


def ping() -> bool:
    client.admin.command("ping")
    return True
