"""
Brand Repository - Data access layer for brands
"""

from typing import List, Optional

from sqlalchemy import func
from sqlalchemy.orm import Session

from domain.models import Brand
from repositories.base import BaseRepository


class BrandRepository(BaseRepository[Brand]):
    """Repository for brand data access"""

    def __init__(self, db: Session):
        super().__init__(db, Brand)

    def get_by_name(self, name: str) -> Optional[Brand]:
        """Get brand by name (case-insensitive)"""
        normalized_name = name.strip().lower()
        return (
            self.db.query(Brand)
            .filter(func.lower(Brand.name) == normalized_name)
            .first()
        )

    def search_by_name(self, query: str, limit: int = 10) -> List[Brand]:
        """Search brands by name (case-insensitive partial match)"""
        return (
            self.db.query(Brand)
            .filter(Brand.name.icontains(query.strip(), autoescape=True))
            .order_by(Brand.name, Brand.id)
            .limit(limit)
            .all()
        )

    def create_brand(self, name: str, description: Optional[str] = None) -> Brand:
        """Stage a new brand"""
        return self.add(Brand(name=name.strip(), description=description))

    def get_or_create(self, name: str) -> Brand:
        """Get existing brand by name, or stage a new one"""
        brand = self.get_by_name(name)
        if brand:
            return brand
        return self.create_brand(name)
