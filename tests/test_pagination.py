"""
Tests for offset and cursor pagination of foods.
"""

import base64

import pytest
from sqlalchemy.orm import Session

from test_fixtures import database, db_session, make_food
from app.exceptions import ServiceValidationError
from services.food_service import FoodService
from services.pagination import (
    MAX_ID,
    after_id_from_cursor,
    build_connection,
    decode_cursor,
    encode_cursor,
)


# =============================================================================
# CURSOR CODEC
# =============================================================================


@pytest.mark.parametrize("value", [0, 1, 7, 42, 10_000, 2**53])
def test_cursor_round_trip(value):
    assert decode_cursor(encode_cursor(value)) == value


def test_cursor_is_base64_of_decimal_id():
    assert encode_cursor(12) == base64.b64encode(b"12").decode()


@pytest.mark.parametrize("cursor", ["%%%", "bm90LWEtbnVtYmVy", base64.b64encode(b"-3").decode()])
def test_decode_rejects_malformed_cursor(cursor):
    with pytest.raises(ValueError):
        decode_cursor(cursor)


@pytest.mark.parametrize("cursor", [None, "", "%%%", "bm90LWEtbnVtYmVy"])
def test_missing_or_malformed_cursor_restarts_from_beginning(cursor):
    assert after_id_from_cursor(cursor) == 0


@pytest.mark.parametrize("value", [2**63, 10**30])
def test_cursor_beyond_key_range_resumes_past_the_end(value):
    assert after_id_from_cursor(encode_cursor(value)) == MAX_ID


def test_largest_key_cursor_is_kept():
    assert after_id_from_cursor(encode_cursor(MAX_ID)) == MAX_ID


def test_build_connection_full_page_reports_next_page():
    class Item:
        def __init__(self, id):
            self.id = id

    connection = build_connection([Item(3), Item(5)], first=2, total_count=9)

    assert [edge.cursor for edge in connection.edges] == [encode_cursor(3), encode_cursor(5)]
    assert connection.has_next_page is True
    assert connection.end_cursor == encode_cursor(5)
    assert connection.total_count == 9


def test_build_connection_empty_page():
    connection = build_connection([], first=5, total_count=0)

    assert connection.edges == []
    assert connection.has_next_page is False
    assert connection.end_cursor is None


# =============================================================================
# SERVICE-LEVEL PAGINATION
# =============================================================================


def _seed(db: Session, count: int) -> list:
    return [make_food(db, f"Food {i:02d}") for i in range(count)]


def test_offset_pagination_orders_by_id(db_session: Session):
    ids = _seed(db_session, 5)

    page = FoodService.list_foods(db_session, limit=2, offset=1)

    assert [food.id for food in page] == ids[1:3]


@pytest.mark.parametrize("limit, offset", [(0, 0), (-1, 0), (5, -1), (101, 0)])
def test_offset_pagination_rejects_bad_arguments(db_session: Session, limit, offset):
    with pytest.raises(ServiceValidationError):
        FoodService.list_foods(db_session, limit=limit, offset=offset, max_page_size=100)


@pytest.mark.parametrize("total, first", [(7, 3), (6, 3), (1, 5), (0, 2)])
def test_cursor_scan_visits_every_food_once(db_session: Session, total, first):
    ids = _seed(db_session, total)

    seen = []
    after = None
    for _ in range(total + 2):
        connection = FoodService.foods_connection(db_session, first=first, after=after)
        assert connection.total_count == total
        seen.extend(edge.node.id for edge in connection.edges)
        if not connection.has_next_page:
            break
        after = connection.end_cursor
    else:
        pytest.fail("pagination did not terminate")

    assert seen == ids


def test_full_last_page_is_followed_by_empty_page(db_session: Session):
    _seed(db_session, 4)

    first_page = FoodService.foods_connection(db_session, first=2)
    second_page = FoodService.foods_connection(db_session, first=2, after=first_page.end_cursor)
    third_page = FoodService.foods_connection(db_session, first=2, after=second_page.end_cursor)

    assert second_page.has_next_page is True
    assert third_page.edges == []
    assert third_page.has_next_page is False
    assert third_page.end_cursor is None


def test_malformed_cursor_starts_from_first_food(db_session: Session):
    ids = _seed(db_session, 3)

    connection = FoodService.foods_connection(db_session, first=10, after="not-a-cursor")

    assert [edge.node.id for edge in connection.edges] == ids


def test_cursor_survives_deletion_of_its_food(db_session: Session):
    ids = _seed(db_session, 4)
    cursor = encode_cursor(ids[1])
    FoodService.delete_food(db_session, ids[1])

    connection = FoodService.foods_connection(db_session, first=10, after=cursor)

    assert [edge.node.id for edge in connection.edges] == ids[2:]
    assert connection.total_count == 3


@pytest.mark.parametrize("first", [0, -2, 101])
def test_connection_rejects_bad_first(db_session: Session, first):
    with pytest.raises(ServiceValidationError):
        FoodService.foods_connection(db_session, first=first, max_page_size=100)


@pytest.mark.parametrize("value", [2**63, 10**30])
def test_cursor_beyond_key_range_returns_empty_page(db_session: Session, value):
    _seed(db_session, 3)

    connection = FoodService.foods_connection(db_session, first=5, after=encode_cursor(value))

    assert connection.edges == []
    assert connection.has_next_page is False
    assert connection.end_cursor is None
    assert connection.total_count == 3
