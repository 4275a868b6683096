"""Partsman admin."""

from partsman.admin.catalog_item import CatalogItemAdmin

__all__ = [
    "CatalogItemAdmin",
]
