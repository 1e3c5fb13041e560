"""Ordering of search results by name or by a nutrient value."""

import unicodedata
from typing import List, Optional, Sequence

from domain.enums import SortBy, SortDirection
from domain.models import Food

MISSING_NUTRIENT_VALUE = float("-inf")


def collation_key(text: Optional[str]) -> tuple:
    """
    Accent- and case-insensitive key, so "Äpple" sorts next to "apple".
    Names that collate equal fall back to their raw text.
    """
    text = text or ""
    decomposed = unicodedata.normalize("NFKD", text)
    base = "".join(ch for ch in decomposed if not unicodedata.combining(ch))
    return (base.casefold(), text)


def nutrient_value(food: Food, nutrient: str) -> float:
    """Value of the first nutrition row named ``nutrient``; -inf when absent"""
    wanted = nutrient.strip().casefold()
    for nutrition in food.nutritions:
        if (nutrition.name or "").casefold() == wanted:
            if nutrition.value is None:
                return MISSING_NUTRIENT_VALUE
            return float(nutrition.value)
    return MISSING_NUTRIENT_VALUE


def sort_foods(
    foods: Sequence[Food],
    sort_by: Optional[SortBy] = None,
    direction: Optional[SortDirection] = None,
    sort_nutrient: Optional[str] = None,
) -> List[Food]:
    """
    Return a new, stably sorted list; the input sequence is left untouched.

    NUTRIENT ordering needs ``sort_nutrient``; without one it orders by name.
    Foods lacking the nutrient count as -inf, so they lead an ascending
    list and trail a descending one.
    """
    sort_by = SortBy(sort_by or SortBy.NAME)
    reverse = SortDirection(direction or SortDirection.ASC) == SortDirection.DESC

    if sort_by == SortBy.NUTRIENT and sort_nutrient and sort_nutrient.strip():
        return sorted(
            foods, key=lambda food: nutrient_value(food, sort_nutrient), reverse=reverse
        )
    return sorted(foods, key=lambda food: collation_key(food.name), reverse=reverse)
