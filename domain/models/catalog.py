"""
Brand and source models.
"""

from sqlalchemy import Column, Integer, Text, ForeignKey
from sqlalchemy.orm import relationship

from domain.models.database import Base


class Brand(Base):
    """Commercial brand producing foods"""

    __tablename__ = "brands"

    id = Column(Integer, primary_key=True, autoincrement=True)
    name = Column(Text, nullable=False, unique=True)
    description = Column(Text)

    foods = relationship("Food", back_populates="brand", lazy="raise")

    def __repr__(self):
        return f"<Brand(id={self.id}, name='{self.name}')>"


class Source(Base):
    """Where food data comes from (official dataset, user contributions, ...)"""

    __tablename__ = "sources"

    id = Column(Integer, primary_key=True, autoincrement=True)
    name = Column(Text, nullable=False)
    type = Column(Text, nullable=False, default="official")
    description = Column(Text, nullable=False, default="")
    user_id = Column(Integer, ForeignKey("users.id", ondelete="SET NULL"))

    foods = relationship("Food", back_populates="source", lazy="raise")
    user = relationship("User", back_populates="sources", lazy="raise")

    def __repr__(self):
        return f"<Source(id={self.id}, name='{self.name}')>"
