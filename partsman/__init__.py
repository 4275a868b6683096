"""
Django Partsman - PC component catalog and configurator filtering.

Usage:
    from partsman import CatalogService, CatalogError, filter_items

    items = CatalogService.list_items(category="pc")
    groups = CatalogService.filter_groups("cpu")
    result = filter_items(items, QueryState(search_text="ryzen"))
"""


def __getattr__(name):
    if name == "CatalogService":
        from partsman.service import CatalogService

        return CatalogService
    elif name == "CatalogError":
        from partsman.exceptions import CatalogError

        return CatalogError
    elif name == "filter_items":
        from partsman.query.engine import filter_items

        return filter_items
    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")


__all__ = ["CatalogService", "CatalogError", "filter_items"]
__version__ = "0.1.0"
