"""Root mutation type."""

import strawberry
from strawberry.types import Info

from api.graphql.inputs import (
    CreateBrandInput,
    CreateFoodInput,
    LoginInput,
    RegisterInput,
    UpdateFoodInput,
)
from api.graphql.permissions import IsAuthenticated
from api.graphql.types import (
    AuthPayloadType,
    BrandType,
    FoodType,
    map_brand,
    map_food,
    map_user,
)
from services import BrandService, FoodService, UserService
from services.helpers import parse_id


@strawberry.type
class Mutation:
    """Write operations; everything except register and login needs a token"""

    @strawberry.mutation
    def register(self, info: Info, input: RegisterInput) -> AuthPayloadType:
        ctx = info.context
        token, user = UserService.register(ctx.db, ctx.settings, input.to_payload())
        return AuthPayloadType(token=token, user=map_user(user))

    @strawberry.mutation
    def login(self, info: Info, input: LoginInput) -> AuthPayloadType:
        ctx = info.context
        token, user = UserService.login(ctx.db, ctx.settings, input.to_payload())
        return AuthPayloadType(token=token, user=map_user(user))

    @strawberry.mutation(
        permission_classes=[IsAuthenticated],
        description="Create a food with its basic nutrition, attributed to the caller",
    )
    def create_food(self, info: Info, input: CreateFoodInput) -> FoodType:
        ctx = info.context
        food = FoodService.create_food(
            ctx.db,
            input.to_payload(),
            user_id=ctx.require_user().id,
            source_name=ctx.settings.user_source_name,
        )
        return map_food(food)

    @strawberry.mutation(permission_classes=[IsAuthenticated])
    def create_brand(self, info: Info, input: CreateBrandInput) -> BrandType:
        return map_brand(BrandService.create_brand(info.context.db, input.to_payload()))

    @strawberry.mutation(permission_classes=[IsAuthenticated])
    def update_food(self, info: Info, id: strawberry.ID, input: UpdateFoodInput) -> FoodType:
        payload = input.to_payload()
        for key, label in (("source_id", "source ID"), ("brand_id", "brand ID")):
            if payload.get(key) is not None:
                payload[key] = parse_id(payload[key], label)
        food = FoodService.update_food(info.context.db, parse_id(id), payload)
        return map_food(food)

    @strawberry.mutation(permission_classes=[IsAuthenticated])
    def delete_food(self, info: Info, id: strawberry.ID) -> bool:
        return FoodService.delete_food(info.context.db, parse_id(id))
