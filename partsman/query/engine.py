"""
Catalog query engine.

`filter_items` narrows and orders an already-fetched item list for one
QueryState. It is a pure function: the input list and its items are never
modified, and malformed or unknown input degrades to a no-op instead of
raising.

Pipeline:
    1. text search over name, description and spec values
    2. price range (inclusive)
    3. category selection (exact match)
    4. per-dimension selections (OR within a dimension, AND across)
    5. sort
"""

import re
from collections.abc import Iterable, Mapping
from decimal import Decimal
from typing import Any

from partsman.protocols import (
    CATEGORY_GROUP,
    PRICE_GROUP,
    ItemInfo,
    PriceRange,
    QueryState,
    SortKey,
    to_decimal,
)
from partsman.query.aliases import get_valid_keys_for_spec

_NUMBER = re.compile(r"-?\d+(?:[.,]\d+)?")


def matches_search(item: ItemInfo, query: str) -> bool:
    """Case-insensitive substring match on name, description or any spec value."""
    if not query:
        return True
    needle = query.lower()
    if needle in (item.name or "").lower():
        return True
    if needle in (item.description or "").lower():
        return True
    return any(needle in str(value).lower() for value in (item.specifications or {}).values())


def resolve_spec_value(specifications: Mapping[str, Any] | None, dimension: str) -> str | None:
    """
    Return the lower-cased value an item holds for `dimension`, or None.

    Aliases are tried in priority order. For each alias an exact key match
    wins over a key that only contains the alias; ties go to the first key
    in the item's own order.
    """
    if not specifications:
        return None
    keys = [(key, str(key).lower()) for key in specifications]
    for alias in get_valid_keys_for_spec(dimension):
        for key, lowered in keys:
            if lowered == alias:
                return str(specifications[key]).lower()
        for key, lowered in keys:
            if alias in lowered:
                return str(specifications[key]).lower()
    return None


def _range_bounds(selection) -> tuple[Decimal | None, Decimal | None] | None:
    """(min, max) of a range selection, or None when it is not one."""
    if isinstance(selection, Mapping):
        if "min" not in selection and "max" not in selection:
            return None
        low, high = selection.get("min"), selection.get("max")
    elif hasattr(selection, "min") and hasattr(selection, "max"):
        low, high = selection.min, selection.max
    else:
        return None
    return to_decimal(low), to_decimal(high)


def _selected_values(selection) -> list[str]:
    """Option ids of a radio (str) or checkbox (iterable) selection."""
    if isinstance(selection, str):
        return [selection] if selection else []
    if isinstance(selection, Iterable) and not isinstance(selection, Mapping):
        return [value for value in selection if isinstance(value, str) and value]
    return []


def _first_number(value: str) -> Decimal | None:
    match = _NUMBER.search(value)
    return to_decimal(match.group()) if match else None


def _within(number: Decimal | None, low: Decimal | None, high: Decimal | None) -> bool:
    if number is None:
        return False
    if low is not None and number < low:
        return False
    if high is not None and number > high:
        return False
    return True


def _dimension_predicate(dimension: str, selection):
    """Build the keep-predicate of one active dimension, or None if inactive."""
    bounds = _range_bounds(selection)
    if bounds is not None:
        low, high = bounds
        if low is None and high is None:
            return None

        def in_range(item: ItemInfo) -> bool:
            value = resolve_spec_value(item.specifications, dimension)
            return value is not None and _within(_first_number(value), low, high)

        return in_range

    wanted = [value.lower() for value in _selected_values(selection)]
    if not wanted:
        return None

    def any_selected(item: ItemInfo) -> bool:
        value = resolve_spec_value(item.specifications, dimension)
        return value is not None and any(option in value for option in wanted)

    return any_selected


def _name_key(item: ItemInfo):
    name = item.name or ""
    return (name.casefold(), name)


def sort_items(items: Iterable[ItemInfo], sort_key: str) -> list[ItemInfo]:
    """Stable sort by one of the SortKey values; unknown keys keep the order."""
    items = list(items)
    if sort_key == SortKey.PRICE_ASC.value:
        return sorted(items, key=lambda item: item.price)
    if sort_key == SortKey.PRICE_DESC.value:
        return sorted(items, key=lambda item: item.price, reverse=True)
    if sort_key == SortKey.NAME_ASC.value:
        return sorted(items, key=_name_key)
    if sort_key == SortKey.NAME_DESC.value:
        return sorted(items, key=_name_key, reverse=True)
    return items


def filter_items(items: Iterable[ItemInfo], state: QueryState) -> list[ItemInfo]:
    """Return the items matching `state`, ordered by `state.sort_key`."""
    result = list(items)

    if state.search_text:
        result = [item for item in result if matches_search(item, state.search_text)]

    price_range = state.price_range
    if isinstance(price_range, Mapping):
        price_range = PriceRange(price_range.get("min"), price_range.get("max"))
    if isinstance(price_range, PriceRange):
        result = [item for item in result if price_range.contains(item.price)]

    active = state.active_filters or {}

    categories = set(_selected_values(active.get(CATEGORY_GROUP)))
    if categories:
        result = [item for item in result if item.category in categories]

    for dimension, selection in active.items():
        if dimension in (CATEGORY_GROUP, PRICE_GROUP):
            continue
        predicate = _dimension_predicate(dimension, selection)
        if predicate is not None:
            result = [item for item in result if predicate(item)]

    return sort_items(result, state.sort_key)
