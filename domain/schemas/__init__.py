"""
Domain schemas package - Pydantic models for validation.
"""

from domain.schemas.food_schemas import (
    NutrientFilter,
    NutritionData,
    NutritionUpdate,
    FoodCreate,
    FoodUpdate,
    BrandCreate,
)
from domain.schemas.user_schemas import UserRegister, LoginRequest

__all__ = [
    "NutrientFilter",
    "NutritionData",
    "NutritionUpdate",
    "FoodCreate",
    "FoodUpdate",
    "BrandCreate",
    "UserRegister",
    "LoginRequest",
]
