# telemart/data/seed.py
from decimal import Decimal

from telemart.data.database import SessionLocal, init_db
from telemart.data.models.product import ProductModel
from telemart.utils.logging import get_logger

logger = get_logger(__name__)

SAMPLE_PRODUCTS = [
    {"name": "Galaxy A15", "title": "Samsung Galaxy A15 128GB", "price": Decimal("179.99"), "category": "mobiles"},
    {"name": "Redmi Note 13", "title": "Xiaomi Redmi Note 13 256GB", "price": Decimal("229.00"), "category": "mobiles"},
    {"name": "Buds FE", "title": "Samsung Galaxy Buds FE", "price": Decimal("69.50"), "category": "accessories"},
    {"name": "USB-C Charger 25W", "title": "25W fast charger", "price": Decimal("19.99"), "category": "accessories"},
]


def seed():
    init_db()
    db = SessionLocal()
    try:
        # tylko jesli katalog jest pusty
        if db.query(ProductModel).first():
            logger.info("Products table not empty, skipping seed")
            return
        db.add_all(ProductModel(**p) for p in SAMPLE_PRODUCTS)
        db.commit()
        logger.info(f"Seeded {len(SAMPLE_PRODUCTS)} products")
    finally:
        db.close()


if __name__ == "__main__":
    seed()
