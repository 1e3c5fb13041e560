"""Services package - Business logic layer"""

from services.food_service import FoodService
from services.search_service import SearchService
from services.brand_service import BrandService
from services.source_service import SourceService
from services.nutrition_service import NutritionService
from services.ingredient_service import IngredientService
from services.user_service import UserService

# Note: validation, pagination and sorting are plain function modules

__all__ = [
    "FoodService",
    "SearchService",
    "BrandService",
    "SourceService",
    "NutritionService",
    "IngredientService",
    "UserService",
]
