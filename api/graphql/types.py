"""GraphQL object types and their ORM mappers."""

from decimal import Decimal
from typing import List, Optional

import strawberry
from strawberry.types import Info

from domain.models import Brand, Food, Ingredient, Nutrition, Source, User
from services import FoodService, NutritionService, UserService
from services.pagination import Connection


def _float(value: Optional[Decimal]) -> Optional[float]:
    return float(value) if value is not None else None


@strawberry.type(name="Nutrition", description="One nutrient value of a food")
class NutritionType:
    id: strawberry.ID
    name: str
    eurofir_code: Optional[str] = strawberry.field(
        description="EuroFIR component code, e.g. 'PROT'"
    )
    value: Optional[float]
    unit: Optional[str]
    weight_gram: Optional[float] = strawberry.field(
        description="Weight basis of the value in grams, usually 100"
    )
    value_type: Optional[str]
    category: Optional[str]
    food_id: strawberry.Private[Optional[int]]

    @strawberry.field
    def food(self, info: Info) -> Optional["FoodType"]:
        food = FoodService.find_food(info.context.db, self.food_id)
        return map_food(food) if food else None


@strawberry.type(name="Ingredient")
class IngredientType:
    id: strawberry.ID
    ingredient_number: Optional[str]
    ingredient_name: str
    water_factor: Optional[float]
    fat_factor: Optional[float]
    weight_before_cooking: Optional[float]
    weight_after_cooking: Optional[float]
    cooking_factor: Optional[str]
    food_id: strawberry.Private[Optional[int]]

    @strawberry.field
    def food(self, info: Info) -> Optional["FoodType"]:
        food = FoodService.find_food(info.context.db, self.food_id)
        return map_food(food) if food else None


@strawberry.type(name="User")
class UserType:
    id: strawberry.ID
    username: str
    email: str
    created_at: str


@strawberry.type(name="Brand")
class BrandType:
    id: strawberry.ID
    name: str
    description: Optional[str]

    @strawberry.field
    def foods(self, info: Info) -> List["FoodType"]:
        foods = FoodService.foods_for_brand(info.context.db, int(self.id))
        return [map_food(food) for food in foods]


@strawberry.type(name="Source", description="Origin of food data")
class SourceType:
    id: strawberry.ID
    name: str
    type: str = strawberry.field(description="'official' or 'user'")
    description: str
    user_id: strawberry.Private[Optional[int]]

    @strawberry.field
    def foods(self, info: Info) -> List["FoodType"]:
        foods = FoodService.foods_for_source(info.context.db, int(self.id))
        return [map_food(food) for food in foods]

    @strawberry.field
    def user(self, info: Info) -> Optional[UserType]:
        user = UserService.find_user(info.context.db, self.user_id)
        return map_user(user) if user else None


@strawberry.type(name="Food", description="A food item with its nutrient values")
class FoodType:
    id: strawberry.ID
    number: Optional[str]
    name: str
    orm: strawberry.Private[Food]

    @strawberry.field(description="Nutrient rows, optionally limited to categories")
    def nutritions(self, category: Optional[List[str]] = None) -> List[NutritionType]:
        rows = NutritionService.filter_by_category(self.orm.nutritions, category)
        return [map_nutrition(row) for row in rows]

    @strawberry.field
    def source(self) -> Optional[SourceType]:
        return map_source(self.orm.source) if self.orm.source else None

    @strawberry.field
    def brand(self) -> Optional[BrandType]:
        return map_brand(self.orm.brand) if self.orm.brand else None

    @strawberry.field
    def ingredients(self) -> List[IngredientType]:
        return [map_ingredient(row) for row in self.orm.ingredients]


@strawberry.type(name="FoodEdge")
class FoodEdgeType:
    node: FoodType
    cursor: str


@strawberry.type(name="PageInfo")
class PageInfoType:
    has_next_page: bool
    end_cursor: Optional[str]


@strawberry.type(name="FoodConnection")
class FoodConnectionType:
    edges: List[FoodEdgeType]
    page_info: PageInfoType
    total_count: int


@strawberry.type(name="AuthPayload")
class AuthPayloadType:
    token: str
    user: UserType


def map_food(food: Food) -> FoodType:
    return FoodType(id=strawberry.ID(str(food.id)), number=food.number, name=food.name, orm=food)


def map_nutrition(row: Nutrition) -> NutritionType:
    return NutritionType(
        id=strawberry.ID(str(row.id)),
        name=row.name,
        eurofir_code=row.eurofir_code,
        value=_float(row.value),
        unit=row.unit,
        weight_gram=_float(row.weight_gram),
        value_type=row.value_type,
        category=row.category,
        food_id=row.food_id,
    )


def map_ingredient(row: Ingredient) -> IngredientType:
    return IngredientType(
        id=strawberry.ID(str(row.id)),
        ingredient_number=row.ingredient_number,
        ingredient_name=row.ingredient_name,
        water_factor=_float(row.water_factor),
        fat_factor=_float(row.fat_factor),
        weight_before_cooking=_float(row.weight_before_cooking),
        weight_after_cooking=_float(row.weight_after_cooking),
        cooking_factor=row.cooking_factor,
        food_id=row.food_id,
    )


def map_brand(brand: Brand) -> BrandType:
    return BrandType(id=strawberry.ID(str(brand.id)), name=brand.name, description=brand.description)


def map_source(source: Source) -> SourceType:
    return SourceType(
        id=strawberry.ID(str(source.id)),
        name=source.name,
        type=source.type,
        description=source.description or "",
        user_id=source.user_id,
    )


def map_user(user: User) -> UserType:
    return UserType(
        id=strawberry.ID(str(user.id)),
        username=user.username,
        email=user.email,
        created_at=user.created_at.isoformat() if user.created_at else "",
    )


def map_connection(connection: Connection[Food]) -> FoodConnectionType:
    return FoodConnectionType(
        edges=[
            FoodEdgeType(node=map_food(edge.node), cursor=edge.cursor)
            for edge in connection.edges
        ],
        page_info=PageInfoType(
            has_next_page=connection.has_next_page, end_cursor=connection.end_cursor
        ),
        total_count=connection.total_count,
    )
