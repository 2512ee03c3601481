# inventory/admin.py
from django.contrib import admin
from .models import InventoryItem


@admin.register(InventoryItem)
class InventoryItemAdmin(admin.ModelAdmin):
    list_display = ('display_id', 'product_name', 'category', 'supplier', 'stock_status', 'cost_per_unit', 'warehouse_code', 'owner', 'last_updated')
    search_fields = ('display_id', 'product_name', 'supplier', 'owner__username')
    list_filter = ('category', 'stock_status')
    readonly_fields = ('display_id', 'owner', 'last_updated')
