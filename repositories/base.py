"""
Base repository interface for data access layer.
This follows the Repository pattern to separate business logic from data access.
"""

from typing import Generic, TypeVar, Optional, List, Type
from sqlalchemy.orm import Session
from abc import ABC

ModelType = TypeVar("ModelType")


class BaseRepository(Generic[ModelType], ABC):
    """
    Base repository providing common data access operations.
    All repositories should inherit from this class.

    Repositories only ``flush``; committing is the job of the service that
    owns the transaction.
    """

    def __init__(self, db: Session, model: Type[ModelType]):
        self.db = db
        self.model = model

    def get_by_id(self, entity_id: int) -> Optional[ModelType]:
        """
        Get entity by ID.

        Args:
            entity_id: Integer primary key

        Returns:
            Entity or None if not found
        """
        return self.db.query(self.model).filter(self.model.id == entity_id).first()

    def get_all(self, skip: int = 0, limit: int = 100) -> List[ModelType]:
        """Get all entities with pagination, ordered by ID"""
        return (
            self.db.query(self.model)
            .order_by(self.model.id)
            .offset(skip)
            .limit(limit)
            .all()
        )

    def add(self, entity: ModelType) -> ModelType:
        """Stage a new entity and assign its ID"""
        self.db.add(entity)
        self.db.flush()
        return entity

    def delete(self, entity: ModelType) -> None:
        """Stage deletion of an entity"""
        self.db.delete(entity)
        self.db.flush()

    def exists(self, entity_id: int) -> bool:
        """Check if entity exists"""
        return (
            self.db.query(self.model.id).filter(self.model.id == entity_id).first()
            is not None
        )
