"""CatalogItem admin."""

from django.contrib import admin
from django.utils.html import format_html
from simple_history.admin import SimpleHistoryAdmin

from partsman.conf import partsman_settings
from partsman.models import CatalogItem


@admin.register(CatalogItem)
class CatalogItemAdmin(SimpleHistoryAdmin):
    list_display = [
        "name",
        "category",
        "formatted_price",
        "stock_status",
        "is_published",
    ]
    list_filter = [
        "category",
        "is_published",
    ]
    search_fields = ["name", "description", "keywords__name"]
    readonly_fields = ["uuid", "created_at", "updated_at"]

    fieldsets = [
        (
            None,
            {"fields": ("name", "category", "description", "keywords")},
        ),
        (
            "Price & Stock",
            {"fields": ("price", "stock")},
        ),
        (
            "Specifications",
            {"fields": ("specifications", "image_url")},
        ),
        (
            "Publication",
            {"fields": ("is_published",)},
        ),
        (
            "Metadata",
            {
                "fields": ("uuid", "created_at", "updated_at"),
                "classes": ("collapse",),
            },
        ),
    ]

    def formatted_price(self, obj):
        return f"{obj.price:.2f} {partsman_settings.CURRENCY_UNIT}"

    formatted_price.short_description = "Price"
    formatted_price.admin_order_field = "price"

    def stock_status(self, obj):
        """Display stock with a colored badge."""
        if obj.is_in_stock:
            return format_html(
                '<span style="background-color:#28a745;color:#fff;'
                'padding:2px 6px;border-radius:3px;font-size:11px;">{} in stock</span>',
                obj.stock,
            )
        return format_html(
            '<span style="background-color:#dc3545;color:#fff;'
            'padding:2px 6px;border-radius:3px;font-size:11px;">Out of stock</span>'
        )

    stock_status.short_description = "Stock"
    stock_status.admin_order_field = "stock"

    actions = ["unpublish_items", "publish_items"]

    @admin.action(description="Unpublish selected items")
    def unpublish_items(self, request, queryset):
        updated = queryset.update(is_published=False)
        self.message_user(request, f"{updated} item(s) unpublished.")

    @admin.action(description="Publish selected items")
    def publish_items(self, request, queryset):
        updated = queryset.update(is_published=True)
        self.message_user(request, f"{updated} item(s) published.")
