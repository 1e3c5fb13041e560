from typing import List
from sqlalchemy.orm import Session

from app.exceptions import NotFoundError
from domain.models import Ingredient
from repositories import IngredientRepository
from services.helpers import check_page_args


class IngredientService:
    """Read access to food ingredients"""

    @staticmethod
    def list_ingredients(
        db: Session, limit: int = 10, offset: int = 0, max_page_size: int = 100
    ) -> List[Ingredient]:
        check_page_args(limit, offset, max_page_size)
        return IngredientRepository(db).get_all(skip=offset, limit=limit)

    @staticmethod
    def get_ingredient(db: Session, ingredient_id: int) -> Ingredient:
        ingredient = IngredientRepository(db).get_by_id(ingredient_id)
        if not ingredient:
            raise NotFoundError(f"Ingredient with ID {ingredient_id} not found.")
        return ingredient
