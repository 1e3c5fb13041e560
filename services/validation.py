"""Sanity checks for basic nutrition values (per 100 g of food)."""

from typing import Any, Mapping, Union

from app.exceptions import ServiceValidationError
from domain.constants import (
    KCAL_PER_GRAM_CARBOHYDRATE,
    KCAL_PER_GRAM_FAT,
    KCAL_PER_GRAM_PROTEIN,
)
from domain.schemas.food_schemas import NutritionData
from services.helpers import validate_schema

# Provided energy may differ from the macronutrient estimate by this much
KCAL_TOLERANCE_PERCENT = 10
KCAL_TOLERANCE_ABSOLUTE = 20

MACRO_LIMIT_MESSAGES = (
    ("carbohydrates", "Carbohydrate value exceeds 100g per 100g, which is physically impossible"),
    ("protein", "Protein value exceeds 100g per 100g, which is physically impossible"),
    ("fat", "Fat value exceeds 100g per 100g, which is physically impossible"),
)


def _fmt(value: float) -> str:
    return f"{value:g}"


def estimate_kcal(carbohydrates: float, protein: float, fat: float) -> float:
    return (
        carbohydrates * KCAL_PER_GRAM_CARBOHYDRATE
        + protein * KCAL_PER_GRAM_PROTEIN
        + fat * KCAL_PER_GRAM_FAT
    )


def validate_nutrition_data(
    nutrition: Union[NutritionData, Mapping[str, Any]],
) -> None:
    """
    Validate basic nutrition values; raises ServiceValidationError on the
    first violated rule.

    Rules, in order:
        1. no value may be negative (all negative fields are listed)
        2. carbohydrates, protein and fat may not exceed 100 g each
        3. carbohydrates + protein + fat may not exceed 100 g
        4. kcal must be close to 4/4/9 kcal per gram of carbohydrates/protein/fat:
           rejected only when off by more than 10% AND by more than 20 kcal
    """
    data = validate_schema(NutritionData, nutrition, "Invalid nutrition values")
    values = data.model_dump()

    negative_fields = [
        field for field in ("carbohydrates", "protein", "fat", "kcal") if values[field] < 0
    ]
    if negative_fields:
        raise ServiceValidationError(
            f"Invalid negative values for: {', '.join(negative_fields)}",
            details={"fields": negative_fields},
        )

    for field, message in MACRO_LIMIT_MESSAGES:
        if values[field] > 100:
            raise ServiceValidationError(message, details={"field": field})

    total_macronutrients = data.carbohydrates + data.protein + data.fat
    if total_macronutrients > 100:
        raise ServiceValidationError(
            f"Total macronutrients ({total_macronutrients:.1f}g) exceed 100g per 100g of food",
            details={"total": total_macronutrients},
        )

    estimated_kcal = estimate_kcal(data.carbohydrates, data.protein, data.fat)
    kcal_difference = abs(estimated_kcal - data.kcal)
    if estimated_kcal:
        kcal_percent_difference = kcal_difference / estimated_kcal * 100
    else:
        kcal_percent_difference = float("inf") if kcal_difference else 0.0

    if (
        kcal_percent_difference > KCAL_TOLERANCE_PERCENT
        and kcal_difference > KCAL_TOLERANCE_ABSOLUTE
    ):
        raise ServiceValidationError(
            f"Provided energy ({_fmt(data.kcal)} kcal) differs significantly "
            f"from calculated value ({estimated_kcal:.0f} kcal)",
            details={"kcal": data.kcal, "estimated_kcal": estimated_kcal},
        )
