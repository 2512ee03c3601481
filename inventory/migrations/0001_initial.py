import django.core.validators
import django.db.models.deletion
import django.utils.timezone
import uuid
from django.conf import settings
from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = [
        migrations.swappable_dependency(settings.AUTH_USER_MODEL),
    ]

    operations = [
        migrations.CreateModel(
            name='InventoryItem',
            fields=[
                ('id', models.UUIDField(default=uuid.uuid4, editable=False, primary_key=True, serialize=False)),
                ('display_id', models.CharField(editable=False, max_length=20)),
                ('product_name', models.CharField(max_length=100)),
                ('category', models.CharField(choices=[('Accessories', 'Accessories'), ('Electronics', 'Electronics'), ('Furniture', 'Furniture'), ('Printing', 'Printing'), ('Audio', 'Audio'), ('Office', 'Office'), ('Storage', 'Storage')], max_length=20)),
                ('supplier', models.CharField(max_length=100)),
                ('stock_status', models.CharField(choices=[('In stock', 'In stock'), ('Out of stock', 'Out of stock')], default='In stock', max_length=20)),
                ('cost_per_unit', models.DecimalField(decimal_places=2, max_digits=12, validators=[django.core.validators.MinValueValidator(0), django.core.validators.MaxValueValidator(1000000)])),
                ('warehouse_code', models.CharField(max_length=20)),
                ('last_updated', models.DateTimeField(default=django.utils.timezone.now)),
                ('owner', models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name='inventory_items', to=settings.AUTH_USER_MODEL)),
            ],
            options={
                'ordering': ['-last_updated'],
            },
        ),
        migrations.AddIndex(
            model_name='inventoryitem',
            index=models.Index(fields=['owner', '-last_updated'], name='inventory_owner_updated_idx'),
        ),
        migrations.AddConstraint(
            model_name='inventoryitem',
            constraint=models.UniqueConstraint(fields=('owner', 'display_id'), name='unique_display_id_per_owner'),
        ),
    ]
