"""
JSON endpoints feeding the listing pages.

    GET items/                    - every published item (?category=pc pre-filter)
    GET items/<id>/               - one item, 404 with CatalogError body if unknown
    GET filter-groups/<category>/ - configurator filter groups
"""

from django.http import JsonResponse
from django.views.decorators.http import require_GET

from partsman.conf import get_catalog_backend
from partsman.exceptions import CatalogError
from partsman.query import get_filter_groups


@require_GET
def item_list(request):
    category = request.GET.get("category") or None
    items = get_catalog_backend().list_items(category=category)
    return JsonResponse([item.as_dict() for item in items], safe=False)


@require_GET
def item_detail(request, item_id):
    item = get_catalog_backend().get_item(str(item_id))
    if item is None:
        error = CatalogError("ITEM_NOT_FOUND", item_id=str(item_id))
        return JsonResponse(error.as_dict(), status=404)
    return JsonResponse(item.as_dict())


@require_GET
def filter_groups(request, category):
    groups = get_filter_groups(category)
    return JsonResponse([group.as_dict() for group in groups], safe=False)
