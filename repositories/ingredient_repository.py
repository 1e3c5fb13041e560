"""
Ingredient Repository - Data access layer for food ingredients
"""

from typing import List

from sqlalchemy.orm import Session

from domain.models import Ingredient
from repositories.base import BaseRepository


class IngredientRepository(BaseRepository[Ingredient]):
    """Repository for ingredient data access"""

    def __init__(self, db: Session):
        super().__init__(db, Ingredient)

    def get_for_food(self, food_id: int) -> List[Ingredient]:
        return (
            self.db.query(Ingredient)
            .filter(Ingredient.food_id == food_id)
            .order_by(Ingredient.id)
            .all()
        )
