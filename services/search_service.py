"""
Advanced food search: a name substring plus any number of nutrient
filters, all AND-combined.

Two evaluation strategies return the same foods in the same order:

* ``subquery``: one SQL statement with a correlated EXISTS per filter
* ``intersection``: one ID query per predicate, intersected in process
"""

import logging
from typing import Any, List, Optional, Sequence, Set

from sqlalchemy.orm import Session

from app.config import SearchStrategy
from app.exceptions import ServiceValidationError
from domain.enums import SortBy, SortDirection
from domain.models import Food
from domain.schemas.food_schemas import NutrientFilter
from repositories import FoodRepository
from services.helpers import validate_schema
from services.sorting import sort_foods

logger = logging.getLogger("foodbase.search")


def parse_nutrient_filters(raw_filters: Optional[Sequence[Any]]) -> List[NutrientFilter]:
    """Validate incoming filters (models or plain mappings)"""
    return [
        validate_schema(NutrientFilter, raw, "Invalid nutrient filter")
        for raw in (raw_filters or [])
    ]


class SearchService:
    """Business logic for multi-criteria food search"""

    @staticmethod
    def search_foods_advanced(
        db: Session,
        name: Optional[str] = None,
        nutrient_filters: Optional[Sequence[Any]] = None,
        limit: int = 20,
        strategy: SearchStrategy = SearchStrategy.SUBQUERY,
    ) -> List[Food]:
        """
        Foods matching every supplied criterion, ordered by ascending ID and
        capped at ``limit``. With no criteria at all the result is empty.
        """
        if limit is None or limit < 0:
            raise ServiceValidationError(
                "limit must be zero or a positive integer.", details={"limit": limit}
            )

        name = (name or "").strip() or None
        filters = parse_nutrient_filters(nutrient_filters)

        if name is None and not filters:
            logger.info("search_skipped reason=no_criteria")
            return []
        if limit == 0:
            return []

        repo = FoodRepository(db)
        strategy = SearchStrategy(strategy)

        if strategy == SearchStrategy.INTERSECTION:
            foods = SearchService._search_by_intersection(repo, name, filters, limit)
        else:
            foods = repo.search(name, filters, limit)

        logger.info(
            f"search_completed strategy={strategy.value} name={name!r} "
            f"filters={len(filters)} limit={limit} results={len(foods)}"
        )
        return foods

    @staticmethod
    def _search_by_intersection(
        repo: FoodRepository,
        name: Optional[str],
        filters: Sequence[NutrientFilter],
        limit: int,
    ) -> List[Food]:
        candidate_ids: Optional[Set[int]] = None

        if name:
            candidate_ids = repo.ids_matching_name(name)

        for nutrient_filter in filters:
            if candidate_ids is not None and not candidate_ids:
                break
            matching = repo.ids_matching_nutrient_filter(nutrient_filter)
            candidate_ids = matching if candidate_ids is None else candidate_ids & matching

        if not candidate_ids:
            return []
        return repo.get_by_ids(sorted(candidate_ids)[:limit])

    @staticmethod
    def search_and_sort(
        db: Session,
        name: Optional[str] = None,
        nutrient_filters: Optional[Sequence[Any]] = None,
        limit: int = 20,
        sort_by: Optional[SortBy] = None,
        sort_direction: Optional[SortDirection] = None,
        sort_nutrient: Optional[str] = None,
        strategy: SearchStrategy = SearchStrategy.SUBQUERY,
    ) -> List[Food]:
        """Search, then order the capped result set; no sort field means NAME ASC"""
        foods = SearchService.search_foods_advanced(
            db, name=name, nutrient_filters=nutrient_filters, limit=limit, strategy=strategy
        )
        return sort_foods(foods, sort_by, sort_direction, sort_nutrient)
