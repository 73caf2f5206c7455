# shopcart/utils/retry.py
from tenacity import (
    retry,
    stop_after_attempt,
    wait_exponential,
    wait_fixed,
    retry_if_exception_type,
)
import redis

from shopcart.domain.errors import CartBusy
from shopcart.utils.settings import CART_LOCK_WAIT_ATTEMPTS, CART_LOCK_WAIT_SECONDS


def redis_retry():
    return retry(
        reraise=True,
        stop=stop_after_attempt(3),
        wait=wait_exponential(multiplier=0.2, min=0.2, max=2),
        retry=retry_if_exception_type(redis.RedisError),
    )


def lock_wait_retry():
    #waits for another request to release the lock, CartBusy propagates once attempts run out
    return retry(
        reraise=True,
        stop=stop_after_attempt(CART_LOCK_WAIT_ATTEMPTS),
        wait=wait_fixed(CART_LOCK_WAIT_SECONDS),
        retry=retry_if_exception_type(CartBusy),
    )
