# soora_api/database/demo_data.py
"""
Seed a local database with demo catalog data and two accounts.

    python -m soora_api.database.demo_data
"""

import logging

from soora_api.config.logging_config import configure_logging
from soora_api.database.session import SessionLocal, init_db
from soora_api.models import Category, Product, User, UserRole, UserTier
from soora_api.queries.product_queries import slugify
from soora_api.services.auth_service import create_access_token

logger = logging.getLogger(__name__)

DEMO_CATEGORIES = [
    ("Accessories", "Scarves, bags and small leather goods", 1),
    ("Apparel", "Clothing for every season", 2),
    ("Home", "Decor and kitchenware", 3),
]

DEMO_PRODUCTS = [
    # name, category, brand, price, stock, featured
    ("Red Silk Scarf", "Accessories", "Lumen", 39.0, 25, True),
    ("Canvas Tote Bag", "Accessories", "Harbour", 24.5, 4, False),
    ("Linen Shirt", "Apparel", "Harbour", 59.0, 40, True),
    ("Wool Beanie", "Apparel", "Nordik", 19.9, 0, False),
    ("Ceramic Mug Set", "Home", "Kiln & Co", 32.0, 12, True),
]


def create_demo_data() -> None:
    init_db()

    db = SessionLocal()
    try:
        if db.query(Product).first():
            logger.info("Demo data already present, skipping")
            return

        for name, description, order in DEMO_CATEGORIES:
            db.add(Category(name=name, description=description, sort_order=order))

        for name, category, brand, price, stock, featured in DEMO_PRODUCTS:
            db.add(Product(
                name=name,
                slug=slugify(name),
                description=f"{name} by {brand}",
                category=category,
                brand=brand,
                price=price,
                stock=stock,
                is_featured=featured,
            ))

        admin = User(email="admin@soora.sg", name="Soora Admin", role=UserRole.ADMIN,
                     tier=UserTier.PLATINUM, email_verified=True)
        customer = User(email="customer@soora.sg", name="Demo Customer", phone="+6591234567",
                        email_verified=True)
        db.add_all([admin, customer])
        db.commit()

        logger.info("Demo data created: %d categories, %d products", len(DEMO_CATEGORIES), len(DEMO_PRODUCTS))
        logger.info("Admin token: %s", create_access_token(admin.id, admin.role, expires_minutes=24 * 60))
        logger.info("Customer token: %s", create_access_token(customer.id, customer.role, expires_minutes=24 * 60))
    except Exception:
        db.rollback()
        logger.exception("Failed to create demo data")
        raise
    finally:
        db.close()


if __name__ == "__main__":
    configure_logging()
    create_demo_data()
