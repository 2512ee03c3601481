# inventory/services.py
"""
Owner-scoped access to inventory items.

Every read and write of InventoryItem goes through this module, and every
operation takes the caller's owner id so the ownership check lives in one place.
Each mutation writes its activity log entry in the same transaction.
"""
import logging
import uuid
from decimal import Decimal

from django.db import IntegrityError, transaction
from django.db.models import Count, DecimalField, Q, Sum, Value
from django.db.models.functions import Coalesce
from django.utils import timezone
from rest_framework.exceptions import NotFound, PermissionDenied, ValidationError

from logs.utils import log_activity
from utils.exceptions import ConflictError, InvalidArgument
from utils.services import call_with_retry, get_next_number
from .identifiers import format_display_id
from .models import IN_STOCK, OUT_OF_STOCK, InventoryItem
from .validators import normalize_item, validate_item

logger = logging.getLogger(__name__)

ZERO = Decimal('0.00')


def sequence_key(owner_id) -> str:
    return f"inventory:{owner_id}"


def _owned_items(owner_id):
    return InventoryItem.objects.filter(owner_id=owner_id).order_by('-last_updated', '-id')


def _load(item_id):
    try:
        pk = uuid.UUID(str(item_id))
    except ValueError:
        raise NotFound('Item not found')
    item = InventoryItem.objects.filter(pk=pk).first()
    if item is None:
        raise NotFound('Item not found')
    return item


def _load_for_mutation(owner_id, item_id, action):
    item = _load(item_id)
    if str(item.owner_id) != str(owner_id):
        logger.warning(f"User {owner_id} tried to {action} item {item.id} owned by {item.owner_id}")
        raise PermissionDenied(f"Not authorized to {action} this item")
    return item


def create_item(owner_id, fields):
    errors = validate_item(fields)
    if errors:
        raise ValidationError(errors)

    values = normalize_item(fields)

    def insert():
        with transaction.atomic():
            sequence = get_next_number(sequence_key(owner_id))
            item = InventoryItem.objects.create(
                owner_id=owner_id,
                display_id=format_display_id(sequence),
                last_updated=timezone.now(),
                **values
            )
            log_activity(
                user_id=owner_id,
                note=f"Item created: {item.display_id} {item.product_name}",
                related_model='InventoryItem',
                related_id=str(item.id)
            )
            return item

    try:
        item = call_with_retry(insert)
    except IntegrityError as e:
        # The counter hands out each number once, so a duplicate here means the
        # counter row was tampered with or bypassed.
        logger.error(f"Display id collision for owner {owner_id}: {e}")
        raise ConflictError('Could not assign a unique inventory id')

    logger.info(f"Generated {item.display_id} for user {owner_id}")
    return item


def list_items(owner_id):
    return list(_owned_items(owner_id))


def get_item(owner_id, item_id):
    item = _load(item_id)
    # Someone else's item looks exactly like a missing one.
    if str(item.owner_id) != str(owner_id):
        raise NotFound('Item not found')
    return item


def search_items(owner_id, query):
    query = (query or '').strip()
    if not query:
        raise InvalidArgument('Search query is required')

    return list(_owned_items(owner_id).filter(
        Q(product_name__icontains=query) |
        Q(category__icontains=query) |
        Q(supplier__icontains=query) |
        Q(display_id__icontains=query)
    ))


def update_item(owner_id, item_id, patch):
    item = _load_for_mutation(owner_id, item_id, 'update')

    errors = validate_item(patch, partial=True)
    if errors:
        raise ValidationError(errors)

    values = normalize_item(patch)
    for field, value in values.items():
        setattr(item, field, value)
    item.last_updated = timezone.now()
    with transaction.atomic():
        item.save(update_fields=list(values) + ['last_updated'])
        log_activity(
            user_id=owner_id,
            note=f"Item updated: {item.display_id} {item.product_name}",
            related_model='InventoryItem',
            related_id=str(item.id)
        )
    return item


def delete_item(owner_id, item_id):
    item = _load_for_mutation(owner_id, item_id, 'delete')
    display_id = item.display_id
    item_id = str(item.id)
    with transaction.atomic():
        item.delete()
        log_activity(
            user_id=owner_id,
            note=f"Item deleted: {display_id}",
            related_model='InventoryItem',
            related_id=item_id
        )
    logger.info(f"Deleted {display_id} for user {owner_id}")
    return display_id


def summarize(owner_id):
    items = InventoryItem.objects.filter(owner_id=owner_id)
    money = DecimalField(max_digits=14, decimal_places=2)

    totals = items.aggregate(
        total_items=Count('id'),
        in_stock=Count('id', filter=Q(stock_status=IN_STOCK)),
        out_of_stock=Count('id', filter=Q(stock_status=OUT_OF_STOCK)),
        value_in_stock=Coalesce(
            Sum('cost_per_unit', filter=Q(stock_status=IN_STOCK)),
            Value(ZERO),
            output_field=money
        ),
    )

    by_category = (
        items.values('category')
        .annotate(count=Count('id'), total_value=Sum('cost_per_unit'))
        .order_by('-count', 'category')
    )

    return {
        'totalItems': totals['total_items'],
        'inStockCount': totals['in_stock'],
        'outOfStockCount': totals['out_of_stock'],
        'totalValueInStock': totals['value_in_stock'],
        'byCategory': [
            {
                'category': row['category'],
                'count': row['count'],
                'totalValue': row['total_value'],
            }
            for row in by_category
        ],
    }
