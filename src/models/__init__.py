# Import all models so SQLAlchemy metadata is populated for Alembic and create_all
from src.models.product import Product

__all__ = [
    "Product",
]
