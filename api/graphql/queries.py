"""Root query type."""

from typing import Annotated, List, Optional

import strawberry
from strawberry.types import Info

from api.graphql.inputs import NutrientFilterInput, SortBy, SortDirection
from api.graphql.types import (
    BrandType,
    FoodConnectionType,
    FoodType,
    IngredientType,
    NutritionType,
    SourceType,
    UserType,
    map_brand,
    map_connection,
    map_food,
    map_ingredient,
    map_nutrition,
    map_source,
    map_user,
)
from services import (
    BrandService,
    FoodService,
    IngredientService,
    NutritionService,
    SearchService,
    SourceService,
    UserService,
)
from services.helpers import parse_id


@strawberry.type
class Query:
    """Read operations; none of them require authentication"""

    @strawberry.field(description="Foods ordered by ID, offset paginated")
    def foods(self, info: Info, limit: int = 10, offset: int = 0) -> List[FoodType]:
        ctx = info.context
        foods = FoodService.list_foods(
            ctx.db, limit=limit, offset=offset, max_page_size=ctx.settings.max_page_size
        )
        return [map_food(food) for food in foods]

    @strawberry.field
    def food(self, info: Info, id: strawberry.ID) -> Optional[FoodType]:
        return map_food(FoodService.get_food(info.context.db, parse_id(id)))

    @strawberry.field(description="Foods ordered by ID, cursor paginated")
    def foods_connection(
        self, info: Info, first: int = 10, after: Optional[str] = None
    ) -> FoodConnectionType:
        ctx = info.context
        connection = FoodService.foods_connection(
            ctx.db, first=first, after=after, max_page_size=ctx.settings.max_page_size
        )
        return map_connection(connection)

    @strawberry.field(
        description="Foods matching a name and every nutrient filter; "
        "with no criteria the result is empty"
    )
    def search_foods_advanced(
        self,
        info: Info,
        name: Optional[str] = None,
        nutrients: Optional[List[NutrientFilterInput]] = None,
        limit: Optional[int] = None,
        first: Annotated[
            Optional[int],
            strawberry.argument(description="Alias of limit; wins when both are given"),
        ] = None,
        sort_by: Optional[SortBy] = SortBy.NAME,
        sort_direction: Optional[SortDirection] = SortDirection.ASC,
        sort_nutrient: Optional[str] = None,
    ) -> List[FoodType]:
        ctx = info.context
        if first is not None:
            limit = first
        elif limit is None:
            limit = ctx.settings.search_default_limit

        foods = SearchService.search_and_sort(
            ctx.db,
            name=name,
            nutrient_filters=[f.to_payload() for f in nutrients or []],
            limit=limit,
            sort_by=sort_by,
            sort_direction=sort_direction,
            sort_nutrient=sort_nutrient,
            strategy=ctx.settings.search_strategy,
        )
        return [map_food(food) for food in foods]

    @strawberry.field(description="Nutrient rows, optionally limited to categories")
    def nutritions(
        self,
        info: Info,
        category: Optional[List[Optional[str]]] = None,
        limit: int = 10,
        offset: int = 0,
    ) -> List[NutritionType]:
        ctx = info.context
        rows = NutritionService.list_nutritions(
            ctx.db,
            categories=[c for c in category or [] if c],
            limit=limit,
            offset=offset,
            max_page_size=ctx.settings.max_page_size,
        )
        return [map_nutrition(row) for row in rows]

    @strawberry.field
    def nutrition(self, info: Info, id: strawberry.ID) -> Optional[NutritionType]:
        return map_nutrition(NutritionService.get_nutrition(info.context.db, parse_id(id)))

    @strawberry.field
    def ingredients(self, info: Info, limit: int = 10, offset: int = 0) -> List[IngredientType]:
        ctx = info.context
        rows = IngredientService.list_ingredients(
            ctx.db, limit=limit, offset=offset, max_page_size=ctx.settings.max_page_size
        )
        return [map_ingredient(row) for row in rows]

    @strawberry.field
    def ingredient(self, info: Info, id: strawberry.ID) -> Optional[IngredientType]:
        return map_ingredient(IngredientService.get_ingredient(info.context.db, parse_id(id)))

    @strawberry.field
    def sources(self, info: Info) -> List[SourceType]:
        return [map_source(source) for source in SourceService.list_sources(info.context.db)]

    @strawberry.field
    def source(self, info: Info, id: strawberry.ID) -> Optional[SourceType]:
        return map_source(SourceService.get_source(info.context.db, parse_id(id)))

    @strawberry.field
    def brands(self, info: Info, limit: int = 10, offset: int = 0) -> List[BrandType]:
        ctx = info.context
        brands = BrandService.list_brands(
            ctx.db, limit=limit, offset=offset, max_page_size=ctx.settings.max_page_size
        )
        return [map_brand(brand) for brand in brands]

    @strawberry.field
    def brand(self, info: Info, id: strawberry.ID) -> Optional[BrandType]:
        return map_brand(BrandService.get_brand(info.context.db, parse_id(id)))

    @strawberry.field(description="Brands whose name contains the text, for autocomplete")
    def search_brands(self, info: Info, name: str, limit: int = 10) -> List[BrandType]:
        ctx = info.context
        brands = BrandService.search_brands(
            ctx.db, name, limit=limit, max_page_size=ctx.settings.max_page_size
        )
        return [map_brand(brand) for brand in brands]

    @strawberry.field
    def get_user(self, info: Info, id: strawberry.ID) -> Optional[UserType]:
        return map_user(UserService.get_user(info.context.db, parse_id(id)))
