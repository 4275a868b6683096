"""
Partsman public API.

CORE (essential):
    CatalogService.get(item_id)          - Get catalog item
    CatalogService.get_info(item_id)     - Get immutable item record
    CatalogService.list_items(category)  - Listing fed to the query engine

QUERY (filtering):
    CatalogService.query(state, category)     - Filter/sort a listing
    CatalogService.filter_groups(category)    - Filter groups of a category
    CatalogService.options(dimension)         - Filter options found in data

CONVENIENCE (helpers):
    CatalogService.search(...)           - Database-side search
"""

import logging
import uuid as uuid_lib
from typing import TYPE_CHECKING

from django.db import models

from partsman.conf import partsman_settings
from partsman.exceptions import CatalogError

if TYPE_CHECKING:
    from partsman.models import CatalogItem
    from partsman.protocols import FilterGroup, FilterOption, ItemInfo, QueryState

logger = logging.getLogger(__name__)


class CatalogService:
    """
    Partsman public API.

    Uses @classmethod so projects can subclass and override single steps
    (e.g. `_fetch_item` for caching).
    """

    # ======================================================================
    # CORE API
    # ======================================================================

    @classmethod
    def get(cls, item_id: str | list[str]) -> "CatalogItem | dict[str, CatalogItem] | None":
        """
        Get item(s) by id.

        Args:
            item_id: Single id or list of ids (UUID strings)

        Returns:
            CatalogItem | None (for single id)
            dict[id, CatalogItem] (for list)
        """
        from partsman.models import CatalogItem

        if isinstance(item_id, list):
            valid = [value for value in item_id if cls._is_uuid(value)]
            items = CatalogItem.objects.filter(uuid__in=valid)
            return {str(item.uuid): item for item in items}
        return cls._fetch_item(item_id)

    @classmethod
    def _fetch_item(cls, item_id: str) -> "CatalogItem | None":
        """Internal: fetch item by id. Override for caching, etc."""
        from partsman.models import CatalogItem

        if not cls._is_uuid(item_id):
            return None
        return CatalogItem.objects.filter(uuid=item_id).first()

    @staticmethod
    def _is_uuid(value) -> bool:
        try:
            uuid_lib.UUID(str(value))
        except ValueError:
            return False
        return True

    @classmethod
    def get_info(cls, item_id: str) -> "ItemInfo":
        """
        Get the immutable record of a published item.

        Raises:
            CatalogError: ITEM_NOT_FOUND if the id is unknown or unpublished
        """
        item = cls.get(item_id)
        if not item or not item.is_published:
            raise CatalogError("ITEM_NOT_FOUND", item_id=str(item_id))
        return item.to_info()

    @classmethod
    def list_items(
        cls,
        category: str | None = None,
        only_published: bool = True,
        only_in_stock: bool = False,
    ) -> list["ItemInfo"]:
        """
        Items for a listing page, ordered by name.

        Args:
            category: Coarse pre-filter (substring of the item category)
            only_published: Only published items
            only_in_stock: Only items with stock > 0

        Returns:
            List of ItemInfo
        """
        from partsman.models import CatalogItem

        qs = CatalogItem.objects.in_category(category)
        if only_published:
            qs = qs.published()
        if only_in_stock:
            qs = qs.in_stock()

        limit = partsman_settings.LISTING_LIMIT
        if limit:
            qs = qs[:limit]

        items = [item.to_info() for item in qs]
        logger.debug("Listed %d catalog items (category=%s)", len(items), category)
        return items

    # ======================================================================
    # QUERY API
    # ======================================================================

    @classmethod
    def query(cls, state: "QueryState", category: str | None = None) -> list["ItemInfo"]:
        """Filter and sort the listing of `category` with `state`."""
        from partsman.query import filter_items

        return filter_items(cls.list_items(category), state)

    @classmethod
    def filter_groups(cls, category: str | None) -> list["FilterGroup"]:
        """Filter groups for a configurator category."""
        from partsman.query import get_filter_groups

        return get_filter_groups(category)

    @classmethod
    def options(cls, dimension: str, category: str | None = None) -> list["FilterOption"]:
        """Distinct values of `dimension` across the listing of `category`."""
        from partsman.query import extract_options

        return extract_options(cls.list_items(category), dimension)

    # ======================================================================
    # CONVENIENCE API
    # ======================================================================

    @classmethod
    def search(
        cls,
        query: str | None = None,
        category: str | None = None,
        keywords: list[str] | None = None,
        only_published: bool = True,
        limit: int = 20,
    ) -> list["CatalogItem"]:
        """
        Search items in the database.

        Args:
            query: Search term (name, description or keyword)
            category: Exact category
            keywords: Filter by keywords (django-taggit)
            only_published: Only published items
            limit: Maximum results

        Returns:
            List of CatalogItem
        """
        from partsman.models import CatalogItem

        qs = CatalogItem.objects.all()

        if only_published:
            qs = qs.published()
        if query:
            qs = qs.filter(
                models.Q(name__icontains=query)
                | models.Q(description__icontains=query)
                | models.Q(keywords__name__icontains=query)
            ).distinct()
        if category:
            qs = qs.filter(category=category)
        if keywords:
            qs = qs.filter(keywords__name__in=keywords).distinct()

        return list(qs[:limit])
