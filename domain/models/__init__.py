"""
Domain models package - SQLAlchemy ORM models.
"""

from domain.models.database import Base, Database
from domain.models.user import User
from domain.models.catalog import Brand, Source
from domain.models.food import Food, Nutrition, Ingredient

__all__ = [
    # Database
    "Base",
    "Database",
    # User models
    "User",
    # Catalog models
    "Brand",
    "Source",
    # Food models
    "Food",
    "Nutrition",
    "Ingredient",
]
