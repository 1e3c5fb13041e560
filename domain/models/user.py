"""
User account model.
"""

from sqlalchemy import Column, Integer, Text, TIMESTAMP
from sqlalchemy.orm import relationship
from sqlalchemy.sql import func

from domain.models.database import Base


class User(Base):
    """User account model"""

    __tablename__ = "users"

    id = Column(Integer, primary_key=True, autoincrement=True)
    username = Column(Text, unique=True, nullable=False)
    email = Column(Text, unique=True, nullable=False)
    password = Column(Text, nullable=False)  # bcrypt hash
    created_at = Column(TIMESTAMP(timezone=True), server_default=func.now())

    # Relationships
    sources = relationship("Source", back_populates="user", lazy="raise")

    def __repr__(self):
        return f"<User(id={self.id}, username='{self.username}')>"
