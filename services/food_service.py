from typing import Any, Dict, List, Optional
from sqlalchemy.orm import Session
from sqlalchemy.exc import IntegrityError
import logging

from app.exceptions import ConflictError, NotFoundError
from domain.constants import BASIC_NUTRIENTS, DEFAULT_WEIGHT_GRAM
from domain.models import Food, Nutrition
from domain.schemas.food_schemas import FoodCreate, FoodUpdate, NutritionData
from repositories import (
    BrandRepository,
    FoodRepository,
    NutritionRepository,
    SourceRepository,
)
from services.helpers import check_page_args, validate_schema
from services.pagination import (
    Connection,
    after_id_from_cursor,
    build_connection,
    check_first,
)
from services.validation import validate_nutrition_data

logger = logging.getLogger("foodbase.food")


class FoodService:
    """Business logic for foods and their basic nutrition"""

    @staticmethod
    def get_food(db: Session, food_id: int) -> Food:
        food = FoodRepository(db).get_by_id(food_id)
        if not food:
            logger.warning(f"food_not_found food_id={food_id}")
            raise NotFoundError(f"Food with ID {food_id} not found.")
        return food

    @staticmethod
    def find_food(db: Session, food_id: Optional[int]) -> Optional[Food]:
        if food_id is None:
            return None
        return FoodRepository(db).get_by_id(food_id)

    @staticmethod
    def list_foods(
        db: Session, limit: int = 10, offset: int = 0, max_page_size: int = 100
    ) -> List[Food]:
        check_page_args(limit, offset, max_page_size)
        return FoodRepository(db).list_foods(limit=limit, offset=offset)

    @staticmethod
    def foods_connection(
        db: Session, first: int = 10, after: Optional[str] = None, max_page_size: int = 100
    ) -> Connection[Food]:
        """One forward page of foods after the cursor, with the current total"""
        check_first(first, max_page_size)
        repo = FoodRepository(db)
        after_id = after_id_from_cursor(after)
        foods = repo.list_after(after_id, first)
        return build_connection(foods, first, repo.count())

    @staticmethod
    def foods_for_brand(db: Session, brand_id: int) -> List[Food]:
        return FoodRepository(db).list_by_brand(brand_id)

    @staticmethod
    def foods_for_source(db: Session, source_id: int) -> List[Food]:
        return FoodRepository(db).list_by_source(source_id)

    @staticmethod
    def basic_nutrition(food: Food) -> Dict[str, Optional[float]]:
        """Current basic values of a loaded food keyed by field name"""
        by_name = {n.name.casefold(): n for n in food.nutritions if n.name}
        values: Dict[str, Optional[float]] = {}
        for basic in BASIC_NUTRIENTS:
            row = by_name.get(basic.name.casefold())
            values[basic.field] = (
                float(row.value) if row is not None and row.value is not None else None
            )
        return values

    @staticmethod
    def create_food(
        db: Session, data: Any, user_id: int, source_name: str
    ) -> Food:
        """
        Create a food with its four basic nutrition rows in one transaction.
        The brand is looked up by name (case-insensitive) and created when
        missing; the food is attached to the user-contributed source.
        """
        data = validate_schema(FoodCreate, data, "Invalid food input")
        validate_nutrition_data(data.nutrition)

        food_repo = FoodRepository(db)
        try:
            brand = (
                BrandRepository(db).get_or_create(data.brand_name)
                if data.brand_name
                else None
            )
            source = SourceRepository(db).get_or_create(
                source_name, source_type="user", description="Foods added by users"
            )

            food = food_repo.add(
                Food(
                    name=data.name,
                    brand_id=brand.id if brand else None,
                    source_id=source.id,
                    created_by=user_id,
                )
            )
            for basic in BASIC_NUTRIENTS:
                db.add(
                    Nutrition(
                        food_id=food.id,
                        name=basic.name,
                        value=getattr(data.nutrition, basic.field),
                        unit=basic.unit,
                        weight_gram=DEFAULT_WEIGHT_GRAM,
                        category=basic.category,
                    )
                )
            db.commit()
            food_id = food.id
        except IntegrityError as e:
            db.rollback()
            logger.warning(f"food_create_conflict name={data.name!r} error={e.orig}")
            raise ConflictError("Food could not be created due to a conflicting record.")
        except Exception:
            db.rollback()
            logger.exception(f"food_create_failed name={data.name!r}")
            raise

        logger.info(
            f"food_created food_id={food_id} user_id={user_id} "
            f"brand={data.brand_name!r}"
        )
        return food_repo.get_by_id(food_id)

    @staticmethod
    def update_food(db: Session, food_id: int, data: Any) -> Food:
        """
        Partial update. Only fields the caller set are applied; an explicit
        ``brand_id=None`` removes the brand. Nutrition values are merged with
        the stored basic values and validated as a whole.
        """
        data = validate_schema(FoodUpdate, data, "Invalid food input")
        changes = data.model_fields_set

        food_repo = FoodRepository(db)
        food = FoodService.get_food(db, food_id)

        merged: Optional[Dict[str, Optional[float]]] = None
        if "nutrition" in changes and data.nutrition is not None:
            merged = FoodService.basic_nutrition(food)
            merged.update(data.nutrition.model_dump(exclude_unset=True, exclude_none=True))
            validate_nutrition_data(
                validate_schema(NutritionData, merged, "Missing basic nutrition values")
            )

        try:
            if "name" in changes and data.name is not None:
                food.name = data.name

            if "source_id" in changes and data.source_id is not None:
                if not SourceRepository(db).exists(data.source_id):
                    raise NotFoundError(f"Source with ID {data.source_id} not found.")
                food.source_id = data.source_id

            if "brand_id" in changes:
                if data.brand_id is not None and not BrandRepository(db).exists(data.brand_id):
                    raise NotFoundError(f"Brand with ID {data.brand_id} not found.")
                food.brand_id = data.brand_id

            if merged is not None:
                FoodService._write_basic_nutrition(db, food, merged)

            db.commit()
        except NotFoundError:
            db.rollback()
            raise
        except Exception:
            db.rollback()
            logger.exception(f"food_update_failed food_id={food_id}")
            raise

        logger.info(f"food_updated food_id={food_id} fields={sorted(changes)}")
        # Drop stale relations so the re-fetch reloads brand/source
        db.expire_all()
        return food_repo.get_by_id(food_id)

    @staticmethod
    def _write_basic_nutrition(
        db: Session, food: Food, values: Dict[str, Optional[float]]
    ) -> None:
        """Update basic rows in place; create any that are missing"""
        rows = {
            n.name.casefold(): n
            for n in NutritionRepository(db).get_for_food(food.id)
            if n.name
        }
        for basic in BASIC_NUTRIENTS:
            value = values.get(basic.field)
            row = rows.get(basic.name.casefold())
            if row is not None:
                row.value = value
            else:
                db.add(
                    Nutrition(
                        food_id=food.id,
                        name=basic.name,
                        value=value,
                        unit=basic.unit,
                        weight_gram=DEFAULT_WEIGHT_GRAM,
                        category=basic.category,
                    )
                )
        db.flush()

    @staticmethod
    def delete_food(db: Session, food_id: int) -> bool:
        """Delete a food; its nutrition and ingredient rows go with it"""
        food = FoodService.get_food(db, food_id)
        try:
            FoodRepository(db).delete(food)
            db.commit()
        except Exception:
            db.rollback()
            logger.exception(f"food_delete_failed food_id={food_id}")
            raise

        logger.info(f"food_deleted food_id={food_id}")
        return True
