"""
Source Repository - Data access layer for data sources
"""

from typing import List, Optional

from sqlalchemy import func
from sqlalchemy.orm import Session

from domain.models import Source
from repositories.base import BaseRepository


class SourceRepository(BaseRepository[Source]):
    """Repository for source data access"""

    def __init__(self, db: Session):
        super().__init__(db, Source)

    def list_sources(self) -> List[Source]:
        return self.db.query(Source).order_by(Source.id).all()

    def get_by_name(self, name: str) -> Optional[Source]:
        return (
            self.db.query(Source)
            .filter(func.lower(Source.name) == name.strip().lower())
            .order_by(Source.id)
            .first()
        )

    def get_or_create(
        self, name: str, source_type: str = "user", description: str = ""
    ) -> Source:
        """Get existing source by name, or stage a new one"""
        source = self.get_by_name(name)
        if source:
            return source
        return self.add(Source(name=name, type=source_type, description=description))

