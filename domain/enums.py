"""
Domain enums for the food database.
Contains the enumeration types used by search and sorting.
"""

import enum


class SortBy(str, enum.Enum):
    """Field used to order advanced search results"""

    NAME = "NAME"
    NUTRIENT = "NUTRIENT"


class SortDirection(str, enum.Enum):
    """Ordering direction"""

    ASC = "ASC"
    DESC = "DESC"
