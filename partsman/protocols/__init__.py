"""Partsman protocols."""

from partsman.protocols.catalog import CatalogBackend, ItemInfo
from partsman.protocols.filters import (
    CATEGORY_GROUP,
    PRICE_GROUP,
    FilterGroup,
    FilterKind,
    FilterOption,
    PriceRange,
    QueryState,
    RangeBounds,
    SortKey,
    to_decimal,
)

__all__ = [
    "CATEGORY_GROUP",
    "PRICE_GROUP",
    "CatalogBackend",
    "FilterGroup",
    "FilterKind",
    "FilterOption",
    "ItemInfo",
    "PriceRange",
    "QueryState",
    "RangeBounds",
    "SortKey",
    "to_decimal",
]
