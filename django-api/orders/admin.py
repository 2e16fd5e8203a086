from django.contrib import admin

from orders.models import Order


@admin.register(Order)
class OrderAdmin(admin.ModelAdmin):
    list_display = ["submitter_name", "region", "total_items", "total_price", "created_at"]
    list_filter = ["collection", "region"]
    search_fields = ["submitter_name", "region"]
    readonly_fields = [
        "collection",
        "garment_quantities",
        "sleeve_counts",
        "accessory_quantities",
        "total_items",
        "total_price",
        "created_at",
    ]
