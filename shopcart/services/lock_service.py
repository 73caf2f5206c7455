# shopcart/services/lock_service.py
import uuid
from contextlib import contextmanager

import redis

from shopcart.domain.errors import CartBusy
from shopcart.utils.retry import lock_wait_retry, redis_retry
from shopcart.utils.settings import CART_LOCK_TTL_SECONDS, REDIS_URL
from shopcart.utils.logging import get_logger

logger = get_logger(__name__)

#LUA compare-and-delete, atomic
_RELEASE_LUA = """
if redis.call('GET', KEYS[1]) == ARGV[1] then
    return redis.call('DEL', KEYS[1])
else
    return 0
end
"""

#redis runs the lua script as one uninterruptible operation,
#nothing gets between GET and DEL, so another holder's lock is never deleted


class LockService:
    """
    Per-owner lock around the cart read-modify-write.

    - one key per owner: cart:{owner_id}:lock
    - value is a random token, only the holder can release it
    - the key expires after ttl so a crashed request cannot block the cart forever
    """

    def __init__(self, url: str | None = None, ttl: int | None = None, client=None):
        self.redis = client or redis.Redis.from_url(
            url or REDIS_URL,
            decode_responses=True,
        )
        self.ttl = ttl or CART_LOCK_TTL_SECONDS

    @staticmethod
    def key_for(owner_id: str) -> str:
        return f"cart:{owner_id}:lock"

    @redis_retry()
    def acquire_cart_lock(self, owner_id: str, token: str) -> bool:
        key = self.key_for(owner_id)
        logger.debug(f"Acquire lock {key}")
        #SET cart:u1:lock "<token>" NX EX 10
        return bool(
            self.redis.set(
                name=key,
                value=token,
                nx=True,
                ex=self.ttl,
            )
        )

    @redis_retry()
    def release_cart_lock(self, owner_id: str, token: str) -> bool:
        key = self.key_for(owner_id)
        logger.debug(f"Release lock {key}")
        res = self.redis.eval(_RELEASE_LUA, 1, key, token)
        return bool(res)

    @lock_wait_retry()
    def _wait_for_lock(self, owner_id: str, token: str) -> None:
        if not self.acquire_cart_lock(owner_id, token):
            raise CartBusy()

    @contextmanager
    def cart_lock(self, owner_id: str):
        token = uuid.uuid4().hex
        try:
            self._wait_for_lock(owner_id, token)
        except CartBusy:
            logger.warning(f"Lock for cart {owner_id} still held, giving up")
            raise

        try:
            yield token
        finally:
            self._release_quietly(owner_id, token)

    def _release_quietly(self, owner_id: str, token: str) -> None:
        #an error from the body must not be replaced by a release failure, the key expires after ttl
        try:
            released = self.release_cart_lock(owner_id, token)
        except redis.RedisError:
            logger.error(f"Failed to release lock for cart {owner_id}", exc_info=True)
            return
        if not released:
            #ttl ran out and someone else took the key
            logger.warning(f"Lock for cart {owner_id} expired before release")
