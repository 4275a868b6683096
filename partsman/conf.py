"""
Partsman configuration.

Usage in settings.py:
    PARTSMAN = {
        "PRICE_MAX": 8000,
        "CURRENCY_UNIT": "€",
        "CATALOG_BACKEND": "partsman.adapters.PartsmanCatalogBackend",
    }
"""

import importlib
import logging
import threading
from dataclasses import dataclass
from typing import Any

from django.conf import settings

logger = logging.getLogger(__name__)


@dataclass
class PartsmanSettings:
    """Partsman configuration settings."""

    PRICE_MIN: int = 0
    PRICE_MAX: int = 5000
    PRICE_STEP: int = 10
    CURRENCY_UNIT: str = "€"
    DEFAULT_SORT: str = "price-asc"
    SEARCH_DEBOUNCE_MS: int = 300
    LISTING_LIMIT: int | None = None
    CATALOG_BACKEND: str = "partsman.adapters.PartsmanCatalogBackend"


def get_partsman_settings() -> PartsmanSettings:
    """Load settings from Django settings."""
    user_settings: dict[str, Any] = getattr(settings, "PARTSMAN", {})
    return PartsmanSettings(**user_settings)


class _LazySettings:
    """Lazy proxy that re-reads settings on every attribute access."""

    def __getattr__(self, name):
        return getattr(get_partsman_settings(), name)


partsman_settings = _LazySettings()


# CatalogBackend singleton
_catalog_backend_lock = threading.Lock()
_catalog_backend_instance = None


def get_catalog_backend():
    """
    Return the configured CatalogBackend instance.

    Loads from PARTSMAN["CATALOG_BACKEND"] setting (dotted path).
    If _catalog_backend_instance was set directly (e.g. in tests), returns it as-is.
    """
    global _catalog_backend_instance
    if _catalog_backend_instance is not None:
        return _catalog_backend_instance
    backend_path = partsman_settings.CATALOG_BACKEND
    with _catalog_backend_lock:
        if _catalog_backend_instance is None:
            module_path, cls_name = backend_path.rsplit(".", 1)
            module = importlib.import_module(module_path)
            cls = getattr(module, cls_name)
            _catalog_backend_instance = cls()
            logger.debug("Loaded catalog backend %s", backend_path)
    return _catalog_backend_instance


def reset_catalog_backend():
    """Reset CatalogBackend singleton (for tests)."""
    global _catalog_backend_instance
    _catalog_backend_instance = None
