"""
Filter session: the state a listing page keeps between user interactions.

The session owns the full item list, the active category and the current
QueryState. Every callback swaps in a new QueryState and recomputes the
result from the complete list.

Usage:
    session = FilterSession(items, category="cpu", on_results=render)
    session.on_filter_change({"manufacturer": "amd"})
    session.on_price_range_change(100, 400)
    session.set_category("gpu")  # clears the cpu selection
"""

import logging
import threading
from collections.abc import Callable, Iterable, Mapping
from dataclasses import replace
from typing import Any

from partsman.conf import partsman_settings
from partsman.protocols import PRICE_GROUP, FilterGroup, ItemInfo, PriceRange, QueryState
from partsman.query.engine import filter_items
from partsman.query.groups import get_filter_groups, get_shop_filter_groups

logger = logging.getLogger(__name__)


class FilterSession:
    """Holds the query state of one listing and recomputes on change."""

    def __init__(
        self,
        items: Iterable[ItemInfo],
        category: str | None = None,
        on_results: Callable[[list[ItemInfo]], None] | None = None,
    ) -> None:
        self.items: tuple[ItemInfo, ...] = tuple(items)
        self.on_results = on_results
        self.category = category
        self.groups: list[FilterGroup] = self._derive_groups()
        self.state = QueryState.initial()
        self.results: list[ItemInfo] = []
        self._recompute()

    # ======================================================================
    # Callbacks
    # ======================================================================

    def on_filter_change(self, active_filters: Mapping[str, Any]) -> list[ItemInfo]:
        """Replace the selection. Keys outside the current groups are dropped."""
        titles = {group.title for group in self.groups}
        selection = {key: value for key, value in active_filters.items() if key in titles}

        price_range = self.state.price_range
        price = selection.get(PRICE_GROUP)
        if isinstance(price, Mapping):
            price_range = PriceRange(
                price.get("min", price_range.min),
                price.get("max", price_range.max),
            )
        elif isinstance(price, PriceRange):
            price_range = price

        return self._update(active_filters=selection, price_range=price_range)

    def on_search_change(self, query: str) -> list[ItemInfo]:
        return self._update(search_text=query or "")

    def on_sort_change(self, sort_key: str) -> list[ItemInfo]:
        return self._update(sort_key=sort_key)

    def on_price_range_change(self, min, max) -> list[ItemInfo]:
        return self._update(price_range=PriceRange(min, max))

    # ======================================================================
    # Category / reset
    # ======================================================================

    def set_category(self, category: str | None) -> list[ItemInfo]:
        """Switch category: new groups, empty selection and search."""
        self.category = category
        self.groups = self._derive_groups()
        return self._update(active_filters={}, search_text="")

    def reset(self) -> list[ItemInfo]:
        self.state = QueryState.initial()
        return self._recompute()

    def has_active_filters(self) -> bool:
        initial = QueryState.initial()
        return (
            any(self._is_selected(value) for value in self.state.active_filters.values())
            or self.state.search_text != ""
            or self.state.sort_key != initial.sort_key
            or self.state.price_range != initial.price_range
        )

    # ======================================================================
    # Internals
    # ======================================================================

    @staticmethod
    def _is_selected(value) -> bool:
        if isinstance(value, (Mapping, PriceRange)):
            return True
        return bool(value)

    def _derive_groups(self) -> list[FilterGroup]:
        if self.category is None:
            return get_shop_filter_groups(self.items)
        return get_filter_groups(self.category)

    def _update(self, **changes) -> list[ItemInfo]:
        self.state = replace(self.state, **changes)
        return self._recompute()

    def _recompute(self) -> list[ItemInfo]:
        self.results = filter_items(self.items, self.state)
        logger.debug(
            "Recomputed listing (category=%s): %d/%d items",
            self.category,
            len(self.results),
            len(self.items),
        )
        if self.on_results is not None:
            self.on_results(self.results)
        return self.results


class SearchDebouncer:
    """
    Delay search dispatch until typing pauses.

    Each `submit` cancels the pending dispatch and schedules a new one after
    `delay_ms` (SEARCH_DEBOUNCE_MS by default).
    """

    def __init__(self, dispatch: Callable[[str], Any], delay_ms: int | None = None) -> None:
        self.dispatch = dispatch
        self.delay_ms = partsman_settings.SEARCH_DEBOUNCE_MS if delay_ms is None else delay_ms
        self._lock = threading.Lock()
        self._timer: threading.Timer | None = None
        self._pending: str | None = None
        self._generation = 0

    def submit(self, query: str) -> None:
        with self._lock:
            if self._timer is not None:
                self._timer.cancel()
            self._pending = query
            self._generation += 1
            self._timer = threading.Timer(self.delay_ms / 1000, self._fire, args=(self._generation,))
            self._timer.daemon = True
            self._timer.start()

    def flush(self) -> None:
        """Dispatch the pending query now, if any."""
        with self._lock:
            if self._timer is not None:
                self._timer.cancel()
            self._generation += 1
            query, self._pending, self._timer = self._pending, None, None
        if query is not None:
            self.dispatch(query)

    def cancel(self) -> None:
        with self._lock:
            if self._timer is not None:
                self._timer.cancel()
            self._generation += 1
            self._pending, self._timer = None, None

    def _fire(self, generation: int) -> None:
        with self._lock:
            # Superseded by a later submit, flush or cancel.
            if generation != self._generation:
                return
            query, self._pending, self._timer = self._pending, None, None
        if query is not None:
            self.dispatch(query)
