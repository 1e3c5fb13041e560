"""GraphQL input types and enums, with conversion to service payloads."""

from typing import Optional

import strawberry

from domain import enums

SortBy = strawberry.enum(enums.SortBy, description="Field used to order search results")
SortDirection = strawberry.enum(enums.SortDirection, description="Ordering direction")


def _set_fields(obj, *names: str) -> dict:
    """Fields the client actually sent; explicit nulls are kept"""
    return {
        name: getattr(obj, name)
        for name in names
        if getattr(obj, name) is not strawberry.UNSET
    }


@strawberry.input(name="NutrientFilter", description="Constraint on one nutrient")
class NutrientFilterInput:
    nutrient: str = strawberry.field(description="Nutrient name substring, e.g. 'Protein'")
    min: Optional[float] = None
    max: Optional[float] = None
    category: Optional[str] = None

    def to_payload(self) -> dict:
        return {
            "nutrient": self.nutrient,
            "min": self.min,
            "max": self.max,
            "category": self.category,
        }


@strawberry.input(name="RegisterInput")
class RegisterInput:
    username: str
    email: str
    password: str

    def to_payload(self) -> dict:
        return {"username": self.username, "email": self.email, "password": self.password}


@strawberry.input(name="LoginInput")
class LoginInput:
    username_or_email: str
    password: str

    def to_payload(self) -> dict:
        return {"username_or_email": self.username_or_email, "password": self.password}


@strawberry.input(name="NutritionInput", description="Basic nutrition per 100 g")
class NutritionInput:
    carbohydrates: float
    protein: float
    fat: float
    kcal: float = strawberry.field(description="Energy in kilocalories per 100 g")

    def to_payload(self) -> dict:
        return {
            "carbohydrates": self.carbohydrates,
            "protein": self.protein,
            "fat": self.fat,
            "kcal": self.kcal,
        }


@strawberry.input(name="UpdateNutritionInput")
class UpdateNutritionInput:
    carbohydrates: Optional[float] = strawberry.UNSET
    protein: Optional[float] = strawberry.UNSET
    fat: Optional[float] = strawberry.UNSET
    kcal: Optional[float] = strawberry.UNSET

    def to_payload(self) -> dict:
        return _set_fields(self, "carbohydrates", "protein", "fat", "kcal")


@strawberry.input(name="CreateFoodInput")
class CreateFoodInput:
    name: str
    nutrition: NutritionInput
    brand_name: Optional[str] = strawberry.field(
        default=None, description="Brand name; the brand is created when it doesn't exist"
    )

    def to_payload(self) -> dict:
        return {
            "name": self.name,
            "brand_name": self.brand_name,
            "nutrition": self.nutrition.to_payload(),
        }


@strawberry.input(name="UpdateFoodInput")
class UpdateFoodInput:
    name: Optional[str] = strawberry.UNSET
    source_id: Optional[strawberry.ID] = strawberry.UNSET
    brand_id: Optional[strawberry.ID] = strawberry.field(
        default=strawberry.UNSET,
        description="Brand to associate with the food; null removes the brand",
    )
    nutrition: Optional[UpdateNutritionInput] = strawberry.UNSET

    def to_payload(self) -> dict:
        payload = _set_fields(self, "name", "source_id", "brand_id")
        if self.nutrition is not strawberry.UNSET:
            payload["nutrition"] = (
                self.nutrition.to_payload() if self.nutrition is not None else None
            )
        return payload


@strawberry.input(name="CreateBrandInput")
class CreateBrandInput:
    name: str
    description: Optional[str] = None

    def to_payload(self) -> dict:
        return {"name": self.name, "description": self.description}
