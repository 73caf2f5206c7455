# shopcart/api/routers/health.py
from fastapi import APIRouter
from fastapi.responses import JSONResponse
from pymongo.errors import PyMongoError

from shopcart.data import database
from shopcart.utils.logging import get_logger

logger = get_logger(__name__)

router = APIRouter(tags=["health"])


@router.get("/health")
def health():
    try:
        database.ping()
    except PyMongoError as e:
        logger.warning(f"Health check failed: {e}")
        return JSONResponse(status_code=503, content={"status": "degraded", "mongo": "down"})
    return {"status": "ok", "mongo": "up"}
