# shopcart/main.py
import uvicorn

from shopcart.api import create_app
from shopcart.utils.logging import get_logger

logger = get_logger(__name__)

app = create_app()

if __name__ == "__main__":
    logger.info("Starting shopcart on port 8000")
    uvicorn.run(app, host="0.0.0.0", port=8000)
