"""Partsman models."""

from partsman.models.catalog_item import CatalogItem, CatalogItemQuerySet

__all__ = [
    "CatalogItem",
    "CatalogItemQuerySet",
]
