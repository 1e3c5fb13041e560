"""
Repositories package - Data access layer.
"""

from repositories.base import BaseRepository
from repositories.food_repository import FoodRepository
from repositories.nutrition_repository import NutritionRepository
from repositories.brand_repository import BrandRepository
from repositories.source_repository import SourceRepository
from repositories.ingredient_repository import IngredientRepository
from repositories.user_repository import UserRepository

__all__ = [
    "BaseRepository",
    "FoodRepository",
    "NutritionRepository",
    "BrandRepository",
    "SourceRepository",
    "IngredientRepository",
    "UserRepository",
]
