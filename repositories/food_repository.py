"""
Food Repository - Data access layer for foods, including the
advanced-search predicates.
"""

from typing import Iterable, List, Optional, Sequence, Set

from sqlalchemy import exists, func
from sqlalchemy.orm import Session, joinedload, selectinload

from domain.models import Food, Nutrition
from domain.schemas.food_schemas import NutrientFilter
from repositories.base import BaseRepository


def food_load_options():
    """Relations every food handed to the API layer carries"""
    return (
        selectinload(Food.nutritions),
        selectinload(Food.ingredients),
        joinedload(Food.brand),
        joinedload(Food.source),
    )


def name_condition(name: str):
    """Case-insensitive substring match on the food name"""
    return Food.name.icontains(name, autoescape=True)


def nutrient_row_conditions(nutrient_filter: NutrientFilter) -> list:
    """Predicates a single nutrition row must satisfy for a filter"""
    conditions = [Nutrition.name.icontains(nutrient_filter.nutrient, autoescape=True)]
    if nutrient_filter.category:
        conditions.append(
            func.lower(Nutrition.category) == nutrient_filter.category.lower()
        )
    if nutrient_filter.min is not None:
        conditions.append(Nutrition.value >= nutrient_filter.min)
    if nutrient_filter.max is not None:
        conditions.append(Nutrition.value <= nutrient_filter.max)
    return conditions


def nutrient_exists(nutrient_filter: NutrientFilter):
    """EXISTS subquery correlated to the outer food row"""
    return exists().where(
        Nutrition.food_id == Food.id, *nutrient_row_conditions(nutrient_filter)
    )


class FoodRepository(BaseRepository[Food]):
    """Repository for food data access"""

    def __init__(self, db: Session):
        super().__init__(db, Food)

    def _query(self):
        return self.db.query(Food).options(*food_load_options())

    def get_by_id(self, food_id: int) -> Optional[Food]:
        """Get food by ID with nutrition, ingredients, brand and source loaded"""
        return self._query().filter(Food.id == food_id).first()

    def get_by_ids(self, food_ids: Iterable[int]) -> List[Food]:
        """Get foods for a set of IDs, ordered by ID"""
        ids = sorted(set(food_ids))
        if not ids:
            return []
        return self._query().filter(Food.id.in_(ids)).order_by(Food.id).all()

    def list_foods(self, limit: int, offset: int = 0) -> List[Food]:
        """Offset pagination ordered by ascending ID"""
        return self._query().order_by(Food.id).offset(offset).limit(limit).all()

    def list_after(self, after_id: int, limit: int) -> List[Food]:
        """Keyset pagination: foods with ``id > after_id``, ascending"""
        query = self._query()
        if after_id:
            query = query.filter(Food.id > after_id)
        return query.order_by(Food.id).limit(limit).all()

    def count(self) -> int:
        return self.db.query(func.count(Food.id)).scalar() or 0

    def list_by_brand(self, brand_id: int) -> List[Food]:
        return self._query().filter(Food.brand_id == brand_id).order_by(Food.id).all()

    def list_by_source(self, source_id: int) -> List[Food]:
        return (
            self._query().filter(Food.source_id == source_id).order_by(Food.id).all()
        )

    # ------------------------------------------------------------------
    # Advanced search
    # ------------------------------------------------------------------

    def search(
        self,
        name: Optional[str],
        nutrient_filters: Sequence[NutrientFilter],
        limit: int,
    ) -> List[Food]:
        """
        Single query with every predicate pushed down: the name filter plus
        one correlated EXISTS per nutrient filter, AND-combined.
        """
        query = self._query()
        if name:
            query = query.filter(name_condition(name))
        for nutrient_filter in nutrient_filters:
            query = query.filter(nutrient_exists(nutrient_filter))
        return query.order_by(Food.id).limit(limit).all()

    def ids_matching_name(self, name: str) -> Set[int]:
        """IDs of foods whose name contains ``name`` (case-insensitive)"""
        rows = self.db.query(Food.id).filter(name_condition(name)).all()
        return {row[0] for row in rows}

    def ids_matching_nutrient_filter(self, nutrient_filter: NutrientFilter) -> Set[int]:
        """IDs of foods having at least one nutrition row matching the filter"""
        rows = (
            self.db.query(Nutrition.food_id)
            .filter(*nutrient_row_conditions(nutrient_filter))
            .distinct()
            .all()
        )
        return {row[0] for row in rows}
