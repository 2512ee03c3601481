# inventory/models.py
import uuid
from django.conf import settings
from django.core.validators import MaxValueValidator, MinValueValidator
from django.db import models
from django.utils import timezone

CATEGORY_CHOICES = (
    ('Accessories', 'Accessories'),
    ('Electronics', 'Electronics'),
    ('Furniture', 'Furniture'),
    ('Printing', 'Printing'),
    ('Audio', 'Audio'),
    ('Office', 'Office'),
    ('Storage', 'Storage'),
)

IN_STOCK = 'In stock'
OUT_OF_STOCK = 'Out of stock'
STOCK_STATUS_CHOICES = (
    (IN_STOCK, 'In stock'),
    (OUT_OF_STOCK, 'Out of stock'),
)

MAX_COST_PER_UNIT = 1000000


class InventoryItem(models.Model):
    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    display_id = models.CharField(max_length=20, editable=False)
    owner = models.ForeignKey(settings.AUTH_USER_MODEL, on_delete=models.CASCADE, related_name='inventory_items')

    product_name = models.CharField(max_length=100)
    category = models.CharField(max_length=20, choices=CATEGORY_CHOICES)
    supplier = models.CharField(max_length=100)
    stock_status = models.CharField(max_length=20, choices=STOCK_STATUS_CHOICES, default=IN_STOCK)
    # The store accepts zero; the item validator is stricter and requires > 0.
    cost_per_unit = models.DecimalField(
        max_digits=12,
        decimal_places=2,
        validators=[MinValueValidator(0), MaxValueValidator(MAX_COST_PER_UNIT)]
    )
    warehouse_code = models.CharField(max_length=20)
    last_updated = models.DateTimeField(default=timezone.now)

    class Meta:
        ordering = ['-last_updated']
        constraints = [
            models.UniqueConstraint(fields=['owner', 'display_id'], name='unique_display_id_per_owner'),
        ]
        indexes = [
            models.Index(fields=['owner', '-last_updated'], name='inventory_owner_updated_idx'),
        ]

    def __str__(self):
        return f"{self.display_id} - {self.product_name}"
