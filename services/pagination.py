"""
Cursor pagination for the food list.

A cursor is the base64 encoding of the decimal food ID, so cursors stay
valid across inserts and deletes elsewhere in the table.
"""

import base64
import binascii
import logging
from dataclasses import dataclass, field
from typing import Generic, List, Optional, TypeVar

from app.exceptions import ServiceValidationError

logger = logging.getLogger("foodbase.pagination")

NodeType = TypeVar("NodeType")

# Largest value a BIGINT primary key can hold
MAX_ID = 2**63 - 1


@dataclass
class Edge(Generic[NodeType]):
    node: NodeType
    cursor: str


@dataclass
class Connection(Generic[NodeType]):
    edges: List[Edge[NodeType]] = field(default_factory=list)
    has_next_page: bool = False
    end_cursor: Optional[str] = None
    total_count: int = 0


def encode_cursor(entity_id: int) -> str:
    return base64.b64encode(str(entity_id).encode("ascii")).decode("ascii")


def decode_cursor(cursor: str) -> int:
    """Decode a cursor back to the ID it was built from; raises ValueError when malformed"""
    try:
        raw = base64.b64decode(cursor.encode("ascii"), validate=True).decode("ascii")
    except (binascii.Error, UnicodeError, AttributeError) as exc:
        raise ValueError(f"malformed cursor: {cursor!r}") from exc
    if not raw.isdigit():
        raise ValueError(f"malformed cursor: {cursor!r}")
    return int(raw)


def after_id_from_cursor(cursor: Optional[str]) -> int:
    """
    ID to resume after. A missing or malformed cursor restarts from the
    beginning of the list; an ID beyond the key range resumes past the end.
    """
    if not cursor:
        return 0
    try:
        after_id = decode_cursor(cursor)
    except ValueError:
        logger.warning(f"cursor_malformed cursor={cursor!r} restarting_from=0")
        return 0
    if after_id > MAX_ID:
        logger.info(f"cursor_out_of_range after_id={after_id} clamped_to={MAX_ID}")
        return MAX_ID
    return after_id


def check_first(first: int, max_page_size: int) -> None:
    if first is None or first < 1:
        raise ServiceValidationError(
            "first must be a positive integer.", details={"first": first}
        )
    if first > max_page_size:
        raise ServiceValidationError(
            f"first must not exceed {max_page_size}.",
            details={"first": first, "max": max_page_size},
        )


def build_connection(items: List[NodeType], first: int, total_count: int) -> Connection[NodeType]:
    """
    Wrap a page of items (ordered by ascending ``id``) as a connection.

    ``has_next_page`` is true whenever the page came back full, so a scan
    whose length is a multiple of ``first`` ends with one empty page.
    """
    edges = [Edge(node=item, cursor=encode_cursor(item.id)) for item in items]
    return Connection(
        edges=edges,
        has_next_page=len(items) == first,
        end_cursor=edges[-1].cursor if edges else None,
        total_count=total_count,
    )
