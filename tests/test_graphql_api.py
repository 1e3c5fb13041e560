"""
End-to-end tests for the GraphQL API through FastAPI's TestClient.

Covers the public operations, authentication of mutations and the error
codes reported in ``errors[].extensions``.
"""

from unittest.mock import patch

from fastapi.testclient import TestClient
from sqlalchemy.orm import Session

from test_fixtures import (
    app_db,
    basic_rows,
    client,
    error_codes,
    gql,
    make_brand,
    make_food,
    make_source,
    register_user,
    test_settings,
)
from services import FoodService
from services.pagination import encode_cursor

FOOD_FIELDS = """
  id
  name
  brand { id name }
  source { id name type }
  nutritions { name value unit category weightGram }
"""


# =============================================================================
# HEALTH
# =============================================================================


def test_health_check(client: TestClient):
    response = client.get("/health-check")

    assert response.status_code == 200
    assert response.json()["status"] == "ok"
    assert response.json()["service"] == "Foodbase"
    assert "X-Request-ID" in response.headers


def test_unknown_route_uses_error_envelope(client: TestClient):
    response = client.get("/does-not-exist")

    assert response.status_code == 404
    body = response.json()
    assert body["success"] is False
    assert body["error"]["code"] == "HTTP_404"


# =============================================================================
# QUERIES
# =============================================================================


def test_food_query_with_relations(client: TestClient, app_db: Session):
    brand = make_brand(app_db, "Arla")
    source = make_source(app_db)
    food_id = make_food(
        app_db,
        "Mellanmjölk",
        basic_rows(carbohydrates=4.8, protein=3.5, fat=1.5, kcal=46),
        brand=brand,
        source=source,
    )

    body = gql(client, f"query($id: ID!) {{ food(id: $id) {{ {FOOD_FIELDS} }} }}", {"id": str(food_id)})

    assert "errors" not in body, body
    food = body["data"]["food"]
    assert food["name"] == "Mellanmjölk"
    assert food["brand"]["name"] == "Arla"
    assert food["source"]["name"] == "Livsmedelsverket"
    assert {n["name"] for n in food["nutritions"]} == {"Carbohydrates", "Protein", "Fat", "Energy"}


def test_food_nutritions_category_argument(client: TestClient, app_db: Session):
    food_id = make_food(
        app_db,
        "Apelsin",
        [("Vitamin C", 53, "mg", "vitamin"), ("Sugar", 9, "g", "macronutrient")],
    )

    body = gql(
        client,
        'query($id: ID!) { food(id: $id) { nutritions(category: ["VITAMIN"]) { name } } }',
        {"id": str(food_id)},
    )

    assert body["data"]["food"]["nutritions"] == [{"name": "Vitamin C"}]


def test_food_not_found(client: TestClient):
    body = gql(client, '{ food(id: "999") { id } }')

    assert body["data"]["food"] is None
    assert error_codes(body) == ["NOT_FOUND"]
    assert body["errors"][0]["extensions"]["status"] == 404
    assert body["errors"][0]["message"] == "Food with ID 999 not found."


def test_invalid_id_is_bad_request(client: TestClient):
    body = gql(client, '{ food(id: "abc") { id } }')

    assert error_codes(body) == ["BAD_REQUEST"]
    assert body["errors"][0]["message"] == "Invalid ID provided."


def test_foods_offset_pagination(client: TestClient, app_db: Session):
    ids = [make_food(app_db, f"Food {i}") for i in range(4)]

    body = gql(client, "{ foods(limit: 2, offset: 1) { id } }")

    assert [int(f["id"]) for f in body["data"]["foods"]] == ids[1:3]


def test_foods_rejects_bad_limit(client: TestClient):
    body = gql(client, "{ foods(limit: 0) { id } }")

    assert error_codes(body) == ["BAD_REQUEST"]


def test_foods_connection_scan(client: TestClient, app_db: Session):
    ids = [make_food(app_db, f"Food {i}") for i in range(5)]
    query = """
    query($first: Int!, $after: String) {
      foodsConnection(first: $first, after: $after) {
        edges { cursor node { id } }
        pageInfo { hasNextPage endCursor }
        totalCount
      }
    }
    """

    seen, after = [], None
    while True:
        body = gql(client, query, {"first": 2, "after": after})
        connection = body["data"]["foodsConnection"]
        assert connection["totalCount"] == 5
        seen.extend(int(edge["node"]["id"]) for edge in connection["edges"])
        for edge in connection["edges"]:
            assert edge["cursor"] == encode_cursor(int(edge["node"]["id"]))
        if not connection["pageInfo"]["hasNextPage"]:
            break
        after = connection["pageInfo"]["endCursor"]

    assert seen == ids


def test_search_foods_advanced(client: TestClient, app_db: Session):
    make_food(app_db, "F1", [("Protein", 20, "g", "macronutrient"), ("Carbs", 5, "g", "macronutrient")])
    make_food(app_db, "F2", [("Protein", 5, "g", "macronutrient"), ("Carbs", 30, "g", "macronutrient")])
    make_food(app_db, "F3", [("Protein", 25, "g", "macronutrient"), ("Carbs", 15, "g", "macronutrient")])
    query = """
    query($nutrients: [NutrientFilter!], $sortBy: SortBy, $dir: SortDirection, $sortNutrient: String) {
      searchFoodsAdvanced(nutrients: $nutrients, sortBy: $sortBy, sortDirection: $dir, sortNutrient: $sortNutrient) {
        name
      }
    }
    """

    both = gql(
        client,
        query,
        {"nutrients": [{"nutrient": "Protein", "min": 10}, {"nutrient": "Carbs", "min": 10}]},
    )
    by_protein = gql(
        client,
        query,
        {
            "nutrients": [{"nutrient": "Carbs"}],
            "sortBy": "NUTRIENT",
            "dir": "DESC",
            "sortNutrient": "Protein",
        },
    )

    assert [f["name"] for f in both["data"]["searchFoodsAdvanced"]] == ["F3"]
    assert [f["name"] for f in by_protein["data"]["searchFoodsAdvanced"]] == ["F3", "F1", "F2"]


def test_search_without_criteria_is_empty(client: TestClient, app_db: Session):
    make_food(app_db, "Anything")

    body = gql(client, "{ searchFoodsAdvanced { id } }")

    assert body["data"]["searchFoodsAdvanced"] == []


def test_search_first_overrides_limit(client: TestClient, app_db: Session):
    for i in range(3):
        make_food(app_db, f"Bar {i}")

    body = gql(client, '{ searchFoodsAdvanced(name: "bar", limit: 3, first: 1) { name } }')

    assert len(body["data"]["searchFoodsAdvanced"]) == 1


def test_search_negative_limit(client: TestClient):
    body = gql(client, '{ searchFoodsAdvanced(name: "x", limit: -1) { id } }')

    assert error_codes(body) == ["BAD_REQUEST"]


def test_catalog_queries(client: TestClient, app_db: Session):
    brand = make_brand(app_db, "Scan")
    make_brand(app_db, "ICA")
    source = make_source(app_db)
    make_food(app_db, "Falukorv", basic_rows(), brand=brand, source=source, ingredients=["Pork"])

    body = gql(
        client,
        """
        {
          brands { name }
          searchBrands(name: "sc") { name foods { name } }
          sources { name foods { name } }
          nutritions(category: ["energy"]) { name food { name } }
          ingredients { ingredientName food { name } }
        }
        """,
    )

    assert "errors" not in body, body
    data = body["data"]
    assert [b["name"] for b in data["brands"]] == ["Scan", "ICA"]
    assert data["searchBrands"] == [{"name": "Scan", "foods": [{"name": "Falukorv"}]}]
    assert data["sources"][0]["foods"] == [{"name": "Falukorv"}]
    assert data["nutritions"] == [{"name": "Energy", "food": {"name": "Falukorv"}}]
    assert data["ingredients"] == [{"ingredientName": "Pork", "food": {"name": "Falukorv"}}]


def test_brand_without_foods_has_empty_list(client: TestClient, app_db: Session):
    brand = make_brand(app_db, "Empty")

    body = gql(client, "query($id: ID!) { brand(id: $id) { name foods { id } } }", {"id": str(brand.id)})

    assert body["data"]["brand"] == {"name": "Empty", "foods": []}


# =============================================================================
# AUTHENTICATION
# =============================================================================


def test_register_and_login(client: TestClient):
    token, user = register_user(client, username="karin", password="hemligt1")

    body = gql(
        client,
        """
        mutation { login(input: {usernameOrEmail: "KARIN", password: "hemligt1"}) {
          token user { id username }
        } }
        """,
    )

    assert token
    assert body["data"]["login"]["user"] == {"id": user["id"], "username": "karin"}

    user_body = gql(client, "query($id: ID!) { getUser(id: $id) { username createdAt } }", {"id": user["id"]})
    assert user_body["data"]["getUser"]["username"] == "karin"
    assert user_body["data"]["getUser"]["createdAt"]


def test_login_wrong_password(client: TestClient):
    register_user(client, username="karin", password="hemligt1")

    body = gql(
        client,
        'mutation { login(input: {usernameOrEmail: "karin", password: "nope"}) { token } }',
    )

    assert error_codes(body) == ["UNAUTHORIZED"]
    assert body["errors"][0]["message"] == "Invalid credentials"


def test_register_duplicate_username(client: TestClient):
    register_user(client, username="karin")

    body = gql(
        client,
        'mutation { register(input: {username: "karin", email: "k2@example.com", password: "pw"}) { token } }',
    )

    assert error_codes(body) == ["CONFLICT"]


CREATE_FOOD = """
mutation($input: CreateFoodInput!) {
  createFood(input: $input) { %s }
}
""" % FOOD_FIELDS


def _create_input(**overrides):
    values = {
        "name": "Knäckebröd",
        "brandName": "Wasa",
        "nutrition": {"carbohydrates": 60, "protein": 10, "fat": 2, "kcal": 298},
    }
    values.update(overrides)
    return {"input": values}


def test_create_food_requires_token(client: TestClient):
    body = gql(client, CREATE_FOOD, _create_input())

    assert body["data"] is None
    assert error_codes(body) == ["UNAUTHORIZED"]


def test_create_food_with_invalid_token_is_unauthorized(client: TestClient):
    body = gql(client, CREATE_FOOD, _create_input(), token="not-a-jwt")

    assert error_codes(body) == ["UNAUTHORIZED"]


def test_create_food(client: TestClient):
    token, _ = register_user(client)

    body = gql(client, CREATE_FOOD, _create_input(), token=token)

    assert "errors" not in body, body
    food = body["data"]["createFood"]
    assert food["name"] == "Knäckebröd"
    assert food["brand"]["name"] == "Wasa"
    assert food["source"]["type"] == "user"
    assert {n["name"]: n["value"] for n in food["nutritions"]} == {
        "Carbohydrates": 60.0,
        "Protein": 10.0,
        "Fat": 2.0,
        "Energy": 298.0,
    }


def test_create_food_invalid_nutrition(client: TestClient):
    token, _ = register_user(client)
    payload = _create_input(nutrition={"carbohydrates": -1, "protein": 0, "fat": 0, "kcal": 0})

    body = gql(client, CREATE_FOOD, payload, token=token)

    assert error_codes(body) == ["BAD_REQUEST"]
    assert "carbohydrates" in body["errors"][0]["message"]
    assert body["errors"][0]["extensions"]["details"] == {"fields": ["carbohydrates"]}


def test_update_and_delete_food(client: TestClient, app_db: Session):
    token, _ = register_user(client)
    brand = make_brand(app_db, "Pågen")
    food_id = make_food(app_db, "Limpa", basic_rows(carbohydrates=40, protein=10, fat=2, kcal=218))

    updated = gql(
        client,
        """
        mutation($id: ID!, $brandId: ID) {
          updateFood(id: $id, input: {name: "Rågbröd", brandId: $brandId, nutrition: {protein: 12, kcal: 226}}) {
            name brand { name } nutritions { name value }
          }
        }
        """,
        {"id": str(food_id), "brandId": str(brand.id)},
        token=token,
    )
    assert "errors" not in updated, updated
    food = updated["data"]["updateFood"]
    assert food["name"] == "Rågbröd"
    assert food["brand"] == {"name": "Pågen"}
    assert {n["name"]: n["value"] for n in food["nutritions"]}["Protein"] == 12.0

    removed_brand = gql(
        client,
        'mutation($id: ID!) { updateFood(id: $id, input: {brandId: null}) { brand { name } } }',
        {"id": str(food_id)},
        token=token,
    )
    assert removed_brand["data"]["updateFood"]["brand"] is None

    deleted = gql(client, 'mutation($id: ID!) { deleteFood(id: $id) }', {"id": str(food_id)}, token=token)
    assert deleted["data"]["deleteFood"] is True

    missing = gql(client, 'mutation($id: ID!) { deleteFood(id: $id) }', {"id": str(food_id)}, token=token)
    assert error_codes(missing) == ["NOT_FOUND"]


def test_create_brand_conflict(client: TestClient):
    token, _ = register_user(client)
    mutation = 'mutation { createBrand(input: {name: "Oatly"}) { id name } }'

    first = gql(client, mutation, token=token)
    second = gql(client, mutation, token=token)

    assert first["data"]["createBrand"]["name"] == "Oatly"
    assert error_codes(second) == ["CONFLICT"]


def test_graphql_syntax_error_passes_through(client: TestClient):
    response = client.post("/graphql", json={"query": "{ foods { id "})

    body = response.json()
    assert body["errors"]
    assert "Syntax Error" in body["errors"][0]["message"]


def test_unexpected_error_is_masked(client: TestClient):
    with patch.object(FoodService, "list_foods", side_effect=RuntimeError("connection string leaked")):
        body = gql(client, "{ foods { id } }")

    assert error_codes(body) == ["INTERNAL_SERVER_ERROR"]
    assert body["errors"][0]["message"] == "An unexpected error occurred"
    assert "leaked" not in str(body)


def test_foods_connection_cursor_beyond_key_range(client: TestClient, app_db: Session):
    make_food(app_db, "Only")

    body = gql(
        client,
        "query($after: String) { foodsConnection(first: 5, after: $after) { edges { cursor } totalCount } }",
        {"after": encode_cursor(2**63)},
    )

    assert "errors" not in body, body
    assert body["data"]["foodsConnection"] == {"edges": [], "totalCount": 1}


def test_search_with_null_sort_by_orders_by_name(client: TestClient, app_db: Session):
    for name in ["Yoghurt", "Apple", "Milk"]:
        make_food(app_db, name, [("Protein", 1, "g", "macronutrient")])

    body = gql(
        client,
        '{ searchFoodsAdvanced(nutrients: [{nutrient: "Protein"}], sortBy: null, sortDirection: null) { name } }',
    )

    assert [f["name"] for f in body["data"]["searchFoodsAdvanced"]] == ["Apple", "Milk", "Yoghurt"]
