"""CatalogBackend implementation for Partsman."""

from partsman.exceptions import CatalogError
from partsman.protocols import CatalogBackend, ItemInfo
from partsman.service import CatalogService


class PartsmanCatalogBackend:
    """
    CatalogBackend implementation using Partsman's catalog service.

    Listing views and other apps read items through this adapter instead of
    touching the model directly.
    """

    def list_items(self, category: str | None = None) -> list[ItemInfo]:
        """Return published items, optionally pre-filtered by category."""
        return CatalogService.list_items(category=category)

    def get_item(self, item_id: str) -> ItemInfo | None:
        """Return item by id."""
        try:
            return CatalogService.get_info(item_id)
        except CatalogError:
            return None


# Verify implementation at import time
if not isinstance(PartsmanCatalogBackend(), CatalogBackend):
    raise TypeError("PartsmanCatalogBackend does not implement CatalogBackend protocol")
