# shopcart/api/__init__.py
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from pymongo.errors import PyMongoError
from redis.exceptions import RedisError

from shopcart.api.routers import carts, health, products, users
from shopcart.data.database import ensure_indexes, get_database
from shopcart.utils.logging import get_logger

logger = get_logger(__name__)

SERVER_ERROR = "An error occurred on the server."


@asynccontextmanager
async def lifespan(app: FastAPI):
    ensure_indexes(get_database())
    yield


async def validation_exception_handler(request: Request, exc: RequestValidationError):
    errors = [
        {"loc": list(e.get("loc", [])), "msg": e.get("msg", "")}
        for e in exc.errors()
    ]
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={"detail": "Invalid request data", "errors": errors},
    )


async def store_exception_handler(request: Request, exc: Exception):
    #details go to the log only, the client gets a generic message
    logger.error(f"Store failure on {request.method} {request.url.path}: {exc}", exc_info=exc)
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"detail": SERVER_ERROR},
    )


def create_app(with_lifespan: bool = True) -> FastAPI:
    app = FastAPI(
        title="Shop Cart Service",
        version="1.0.0",
        lifespan=lifespan if with_lifespan else None,
    )

    app.add_exception_handler(RequestValidationError, validation_exception_handler)
    app.add_exception_handler(PyMongoError, store_exception_handler)
    app.add_exception_handler(RedisError, store_exception_handler)
    app.add_exception_handler(Exception, store_exception_handler)

    # Include routers
    app.include_router(health.router)
    app.include_router(products.router)
    app.include_router(users.router)
    app.include_router(carts.router)

    return app
