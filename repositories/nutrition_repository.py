"""
Nutrition Repository - Data access layer for nutrient rows
"""

from typing import List, Optional, Sequence

from sqlalchemy import func
from sqlalchemy.orm import Session

from domain.models import Nutrition
from repositories.base import BaseRepository


class NutritionRepository(BaseRepository[Nutrition]):
    """Repository for nutrition data access"""

    def __init__(self, db: Session):
        super().__init__(db, Nutrition)

    def list_nutritions(
        self,
        limit: int,
        offset: int = 0,
        categories: Optional[Sequence[str]] = None,
    ) -> List[Nutrition]:
        """List nutrient rows, optionally restricted to categories (case-insensitive)"""
        query = self.db.query(Nutrition)
        wanted = [c.lower() for c in (categories or []) if c]
        if wanted:
            query = query.filter(func.lower(Nutrition.category).in_(wanted))
        return query.order_by(Nutrition.id).offset(offset).limit(limit).all()

    def get_for_food(self, food_id: int) -> List[Nutrition]:
        return (
            self.db.query(Nutrition)
            .filter(Nutrition.food_id == food_id)
            .order_by(Nutrition.id)
            .all()
        )
