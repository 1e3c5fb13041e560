from typing import Any, List
from sqlalchemy.orm import Session
from sqlalchemy.exc import IntegrityError
import logging

from app.exceptions import ConflictError, NotFoundError, ServiceValidationError
from domain.models import Brand
from domain.schemas.food_schemas import BrandCreate
from repositories import BrandRepository
from services.helpers import check_page_args, validate_schema

logger = logging.getLogger("foodbase.brand")


class BrandService:
    """Business logic for brands"""

    @staticmethod
    def get_brand(db: Session, brand_id: int) -> Brand:
        brand = BrandRepository(db).get_by_id(brand_id)
        if not brand:
            raise NotFoundError(f"Brand with ID {brand_id} not found.")
        return brand

    @staticmethod
    def list_brands(
        db: Session, limit: int = 10, offset: int = 0, max_page_size: int = 100
    ) -> List[Brand]:
        check_page_args(limit, offset, max_page_size)
        return BrandRepository(db).get_all(skip=offset, limit=limit)

    @staticmethod
    def search_brands(
        db: Session, name: str, limit: int = 10, max_page_size: int = 100
    ) -> List[Brand]:
        """Brands whose name contains ``name`` (case-insensitive), ordered by name"""
        check_page_args(limit, 0, max_page_size)
        if not name or not name.strip():
            raise ServiceValidationError("Search name must not be empty.")
        return BrandRepository(db).search_by_name(name, limit=limit)

    @staticmethod
    def create_brand(db: Session, data: Any) -> Brand:
        data = validate_schema(BrandCreate, data, "Invalid brand input")
        repo = BrandRepository(db)

        if repo.get_by_name(data.name):
            raise ConflictError(
                f"Brand '{data.name}' already exists.", details={"name": data.name}
            )

        try:
            brand = repo.create_brand(data.name, data.description)
            db.commit()
            db.refresh(brand)
        except IntegrityError:
            db.rollback()
            raise ConflictError(
                f"Brand '{data.name}' already exists.", details={"name": data.name}
            )
        except Exception:
            db.rollback()
            logger.exception(f"brand_create_failed name={data.name!r}")
            raise

        logger.info(f"brand_created brand_id={brand.id} name={brand.name!r}")
        return brand
