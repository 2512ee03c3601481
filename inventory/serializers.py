# inventory/serializers.py
from rest_framework import serializers
from .models import InventoryItem


class InventoryItemSerializer(serializers.ModelSerializer):
    """Read-side representation; writes go through inventory.services."""
    displayId = serializers.CharField(source='display_id')
    productName = serializers.CharField(source='product_name')
    stockStatus = serializers.CharField(source='stock_status')
    costPerUnit = serializers.DecimalField(source='cost_per_unit', max_digits=12, decimal_places=2, coerce_to_string=False)
    warehouseCode = serializers.CharField(source='warehouse_code')
    lastUpdated = serializers.DateTimeField(source='last_updated')
    ownerId = serializers.UUIDField(source='owner_id')

    class Meta:
        model = InventoryItem
        fields = [
            'id', 'displayId', 'productName', 'category', 'supplier',
            'stockStatus', 'costPerUnit', 'warehouseCode', 'lastUpdated', 'ownerId',
        ]
        read_only_fields = fields


class CategoryStatsSerializer(serializers.Serializer):
    category = serializers.CharField()
    count = serializers.IntegerField()
    totalValue = serializers.DecimalField(max_digits=14, decimal_places=2, coerce_to_string=False)


class SummarySerializer(serializers.Serializer):
    totalItems = serializers.IntegerField()
    inStockCount = serializers.IntegerField()
    outOfStockCount = serializers.IntegerField()
    totalValueInStock = serializers.DecimalField(max_digits=14, decimal_places=2, coerce_to_string=False)
    byCategory = CategoryStatsSerializer(many=True)
