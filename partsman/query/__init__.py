"""Client-side catalog filtering: aliases, filter groups, engine and session."""

from partsman.query.aliases import DIMENSIONS, SPEC_ALIASES, get_valid_keys_for_spec
from partsman.query.engine import filter_items, matches_search, resolve_spec_value, sort_items
from partsman.query.groups import get_filter_groups, get_price_group, get_shop_filter_groups
from partsman.query.options import extract_options
from partsman.query.session import FilterSession, SearchDebouncer

__all__ = [
    "DIMENSIONS",
    "SPEC_ALIASES",
    "FilterSession",
    "SearchDebouncer",
    "extract_options",
    "filter_items",
    "get_filter_groups",
    "get_price_group",
    "get_shop_filter_groups",
    "get_valid_keys_for_spec",
    "matches_search",
    "resolve_spec_value",
    "sort_items",
]
