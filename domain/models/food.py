"""
Food-related database models.

Relationships use ``lazy="raise"``: repositories load what a caller needs
explicitly, so there are no hidden per-row queries.
"""

from sqlalchemy import (
    Column,
    Integer,
    Text,
    Numeric,
    TIMESTAMP,
    ForeignKey,
)
from sqlalchemy.orm import relationship
from sqlalchemy.sql import func

from domain.models.database import Base


class Food(Base):
    """A food item with its nutrient rows and ingredients"""

    __tablename__ = "foods"

    id = Column(Integer, primary_key=True, autoincrement=True)
    number = Column(Text)  # external number, e.g. the national food database id
    name = Column(Text, nullable=False, index=True)
    brand_id = Column(Integer, ForeignKey("brands.id", ondelete="SET NULL"))
    source_id = Column(Integer, ForeignKey("sources.id", ondelete="SET NULL"))
    created_by = Column(Integer, ForeignKey("users.id", ondelete="SET NULL"))
    created_at = Column(TIMESTAMP(timezone=True), server_default=func.now())

    # Relationships
    nutritions = relationship(
        "Nutrition",
        back_populates="food",
        cascade="all, delete-orphan",
        order_by="Nutrition.id",
        lazy="raise",
    )
    ingredients = relationship(
        "Ingredient",
        back_populates="food",
        cascade="all, delete-orphan",
        order_by="Ingredient.id",
        lazy="raise",
    )
    brand = relationship("Brand", back_populates="foods", lazy="raise")
    source = relationship("Source", back_populates="foods", lazy="raise")
    creator = relationship("User", lazy="raise")

    def __repr__(self):
        return f"<Food(id={self.id}, name='{self.name}')>"


class Nutrition(Base):
    """One nutrient value of a food, per ``weight_gram`` grams"""

    __tablename__ = "nutritions"

    id = Column(Integer, primary_key=True, autoincrement=True)
    food_id = Column(
        Integer, ForeignKey("foods.id", ondelete="CASCADE"), nullable=False, index=True
    )
    name = Column(Text, nullable=False, index=True)
    eurofir_code = Column(Text)
    value = Column(Numeric(12, 4))
    unit = Column(Text)
    weight_gram = Column(Numeric(10, 2), default=100)
    category = Column(Text)
    value_type = Column(Text)

    # Relationships
    food = relationship("Food", back_populates="nutritions", lazy="raise")

    def __repr__(self):
        return f"<Nutrition(id={self.id}, name='{self.name}', value={self.value})>"


class Ingredient(Base):
    """Ingredient of a composite food"""

    __tablename__ = "ingredients"

    id = Column(Integer, primary_key=True, autoincrement=True)
    food_id = Column(
        Integer, ForeignKey("foods.id", ondelete="CASCADE"), nullable=False, index=True
    )
    ingredient_number = Column(Text)
    ingredient_name = Column(Text, nullable=False)
    water_factor = Column(Numeric(10, 4))
    fat_factor = Column(Numeric(10, 4))
    weight_before_cooking = Column(Numeric(10, 2))
    weight_after_cooking = Column(Numeric(10, 2))
    cooking_factor = Column(Text)

    # Relationships
    food = relationship("Food", back_populates="ingredients", lazy="raise")

    def __repr__(self):
        return f"<Ingredient(id={self.id}, name='{self.ingredient_name}')>"
