# backend/utils/seed_data.py
"""Seed a fresh database with a small grocery catalog.

Usage (from backend/):  python -m utils.seed_data
Rows that already exist (matched by name) are skipped.
"""
import logging

from sqlalchemy.orm import Session

from config import settings
from database import create_db_engine, create_session_factory, init_db
from models.category import Category
from models.product import Product

logger = logging.getLogger(__name__)

SAMPLE_CATEGORIES = ["Fruit", "Vegetables", "Dairy", "Bakery", "Drinks"]

SAMPLE_PRODUCTS = [
    {"name": "Bananas", "description": "Bunch of ripe bananas", "price": 40, "category": "Fruit"},
    {"name": "Apples", "description": "Red apples, 1 kg", "price": 120, "category": "Fruit"},
    {"name": "Tomatoes", "description": "Vine tomatoes, 500 g", "price": 60, "category": "Vegetables"},
    {"name": "Potatoes", "description": "Potatoes, 2 kg", "price": 50, "category": "Vegetables"},
    {"name": "Milk", "description": "Full cream milk, 1 l", "price": 55, "category": "Dairy"},
    {"name": "Curd", "description": "Fresh curd, 400 g", "price": 45, "category": "Dairy"},
    {"name": "Bread", "description": "Whole wheat loaf", "price": 35, "category": "Bakery"},
    {"name": "Orange Juice", "description": "No added sugar, 1 l", "price": 110, "category": "Drinks"},
]


def seed_categories(db: Session) -> int:
    existing = {name for (name,) in db.query(Category.name).all()}
    count = 0
    for name in SAMPLE_CATEGORIES:
        if name in existing:
            continue
        db.add(Category(name=name))
        count += 1
    db.commit()
    logger.info("Imported %s new categories", count)
    return count


def seed_products(db: Session) -> int:
    existing = {name for (name,) in db.query(Product.name).all()}
    count = 0
    for p in SAMPLE_PRODUCTS:
        if p["name"] in existing:
            continue
        db.add(Product(**p))
        count += 1
    db.commit()
    logger.info("Imported %s new products", count)
    return count


def seed(database_url: str):
    engine = create_db_engine(database_url)
    init_db(engine)
    db = create_session_factory(engine)()
    try:
        return seed_categories(db), seed_products(db)
    finally:
        db.close()
        engine.dispose()


if __name__ == "__main__":
    logging.basicConfig(level=settings.LOG_LEVEL.upper())
    categories, products = seed(settings.DATABASE_URL)
    print(f"Seeded {categories} categories and {products} products.")
