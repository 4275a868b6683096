"""Partsman adapters."""

from partsman.adapters.catalog_backend import PartsmanCatalogBackend

__all__ = [
    "PartsmanCatalogBackend",
]
