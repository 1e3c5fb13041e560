from typing import List
from sqlalchemy.orm import Session

from app.exceptions import NotFoundError
from domain.models import Source
from repositories import SourceRepository


class SourceService:
    """Read access to food data sources"""

    @staticmethod
    def list_sources(db: Session) -> List[Source]:
        return SourceRepository(db).list_sources()

    @staticmethod
    def get_source(db: Session, source_id: int) -> Source:
        source = SourceRepository(db).get_by_id(source_id)
        if not source:
            raise NotFoundError(f"Source with ID {source_id} not found.")
        return source
