from pydantic import BaseModel, Field, field_validator
from typing import Optional


class NutrientFilter(BaseModel):
    """One nutrient constraint of an advanced food search"""

    nutrient: str = Field(..., description="Nutrient name substring, e.g. 'Protein'")
    min: Optional[float] = Field(
        None, allow_inf_nan=False, description="Inclusive lower bound for the value"
    )
    max: Optional[float] = Field(
        None, allow_inf_nan=False, description="Inclusive upper bound for the value"
    )
    category: Optional[str] = Field(
        None, description="Nutrient category, e.g. 'macronutrient', 'vitamin'"
    )

    @field_validator("nutrient")
    @classmethod
    def nutrient_not_blank(cls, v: str) -> str:
        v = v.strip()
        if not v:
            raise ValueError("nutrient must not be blank")
        return v

    @field_validator("category")
    @classmethod
    def normalize_category(cls, v: Optional[str]) -> Optional[str]:
        if v is None:
            return None
        v = v.strip()
        return v or None


class NutritionData(BaseModel):
    """Basic nutrition values per 100 g"""

    carbohydrates: float = Field(..., allow_inf_nan=False)
    protein: float = Field(..., allow_inf_nan=False)
    fat: float = Field(..., allow_inf_nan=False)
    kcal: float = Field(..., allow_inf_nan=False)


class NutritionUpdate(BaseModel):
    """Partial basic nutrition values; missing fields keep their stored value"""

    carbohydrates: Optional[float] = Field(None, allow_inf_nan=False)
    protein: Optional[float] = Field(None, allow_inf_nan=False)
    fat: Optional[float] = Field(None, allow_inf_nan=False)
    kcal: Optional[float] = Field(None, allow_inf_nan=False)


class FoodCreate(BaseModel):
    """Schema for creating a food with its basic nutrition"""

    name: str = Field(..., min_length=1)
    brand_name: Optional[str] = Field(
        None, description="Brand name; the brand is created if it doesn't exist"
    )
    nutrition: NutritionData

    @field_validator("name")
    @classmethod
    def name_not_blank(cls, v: str) -> str:
        v = v.strip()
        if not v:
            raise ValueError("name must not be blank")
        return v

    @field_validator("brand_name")
    @classmethod
    def normalize_brand_name(cls, v: Optional[str]) -> Optional[str]:
        if v is None:
            return None
        return v.strip() or None


class FoodUpdate(BaseModel):
    """
    Schema for a partial food update.

    Only fields present in ``model_fields_set`` are applied, so an explicit
    ``brand_id=None`` removes the brand while an absent ``brand_id`` keeps it.
    """

    name: Optional[str] = None
    source_id: Optional[int] = None
    brand_id: Optional[int] = None
    nutrition: Optional[NutritionUpdate] = None

    @field_validator("name")
    @classmethod
    def name_not_blank(cls, v: Optional[str]) -> Optional[str]:
        if v is None:
            return None
        v = v.strip()
        if not v:
            raise ValueError("name must not be blank")
        return v


class BrandCreate(BaseModel):
    """Schema for creating a brand"""

    name: str = Field(..., min_length=1)
    description: Optional[str] = None

    @field_validator("name")
    @classmethod
    def name_not_blank(cls, v: str) -> str:
        v = v.strip()
        if not v:
            raise ValueError("name must not be blank")
        return v
