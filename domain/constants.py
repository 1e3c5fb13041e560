"""
Basic nutrition rows created with every user-contributed food.
"""

from typing import NamedTuple


class BasicNutrient(NamedTuple):
    field: str
    name: str
    unit: str
    category: str


BASIC_NUTRIENTS = (
    BasicNutrient("carbohydrates", "Carbohydrates", "g", "macronutrient"),
    BasicNutrient("protein", "Protein", "g", "macronutrient"),
    BasicNutrient("fat", "Fat", "g", "macronutrient"),
    BasicNutrient("kcal", "Energy", "kcal", "energy"),
)

BASIC_NUTRIENT_BY_FIELD = {n.field: n for n in BASIC_NUTRIENTS}

# Nutrient values are expressed per this many grams of food
DEFAULT_WEIGHT_GRAM = 100

# Energy per gram of macronutrient
KCAL_PER_GRAM_CARBOHYDRATE = 4
KCAL_PER_GRAM_PROTEIN = 4
KCAL_PER_GRAM_FAT = 9
