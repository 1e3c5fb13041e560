from typing import List, Optional, Sequence
from sqlalchemy.orm import Session

from app.exceptions import NotFoundError
from domain.models import Nutrition
from repositories import NutritionRepository
from services.helpers import check_page_args


class NutritionService:
    """Read access to nutrient rows"""

    @staticmethod
    def list_nutritions(
        db: Session,
        categories: Optional[Sequence[str]] = None,
        limit: int = 10,
        offset: int = 0,
        max_page_size: int = 100,
    ) -> List[Nutrition]:
        check_page_args(limit, offset, max_page_size)
        return NutritionRepository(db).list_nutritions(
            limit=limit, offset=offset, categories=categories
        )

    @staticmethod
    def get_nutrition(db: Session, nutrition_id: int) -> Nutrition:
        nutrition = NutritionRepository(db).get_by_id(nutrition_id)
        if not nutrition:
            raise NotFoundError(f"Nutrition with ID {nutrition_id} not found.")
        return nutrition

    @staticmethod
    def filter_by_category(
        nutritions: Sequence[Nutrition], categories: Optional[Sequence[str]]
    ) -> List[Nutrition]:
        """Rows of an already loaded food whose category is one of ``categories``"""
        wanted = {c.strip().casefold() for c in (categories or []) if c and c.strip()}
        if not wanted:
            return list(nutritions)
        return [
            n for n in nutritions if n.category and n.category.casefold() in wanted
        ]
