# shopcart/data/seed.py
from shopcart.data.database import get_database
from shopcart.repos.product_repo import ProductRepo
from shopcart.utils.logging import get_logger

logger = get_logger(__name__)

PRODUCTS = [
    {
        "name": "Camiseta",
        "price": 49.90,
        "image_url": "https://example.com/camiseta.jpg",
        "description": "Camiseta de algodão, disponível em várias cores e tamanhos.",
    },
    {
        "name": "Calça Jeans",
        "price": 99.90,
        "image_url": "https://example.com/calca-jeans.jpg",
        "description": "Calça jeans confortável e durável, perfeita para o dia a dia.",
    },
]


def seed(db=None) -> int:
    repo = ProductRepo(db if db is not None else get_database())
    # not forcing: only seed if empty
    if repo.count():
        logger.info("Products already present, skipping seed")
        return 0

    for data in PRODUCTS:
        repo.create_product(data)
    logger.info(f"Seeded {len(PRODUCTS)} products")
    return len(PRODUCTS)


if __name__ == "__main__":
    seed()
