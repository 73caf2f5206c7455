# shopcart/utils/settings.py
import os
from dotenv import load_dotenv

load_dotenv()

MONGO_URL = os.getenv("MONGO_URL", "mongodb://mongo:27017")
MONGO_DB = os.getenv("MONGO_DB", "bancoaula")
MONGO_TIMEOUT_MS = int(os.getenv("MONGO_TIMEOUT_MS", 5000))
REDIS_URL = os.getenv("REDIS_URL", "redis://redis:6379/0")
CART_LOCK_TTL_SECONDS = int(os.getenv("CART_LOCK_TTL_SECONDS", 10))
CART_LOCK_WAIT_ATTEMPTS = int(os.getenv("CART_LOCK_WAIT_ATTEMPTS", 20))
CART_LOCK_WAIT_SECONDS = float(os.getenv("CART_LOCK_WAIT_SECONDS", 0.05))
BCRYPT_ROUNDS = int(os.getenv("BCRYPT_ROUNDS", 10))
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")
