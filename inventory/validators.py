# inventory/validators.py
"""
Canonical field rules for inventory items.

``validate_item`` is the single rule set the API enforces. ``FIELD_RULES``
describes the same limits so a client can run identical checks locally before
submitting; ``POST /api/items/validate/`` runs them server side without
touching the store.
"""
import math
from collections.abc import Mapping
from decimal import ROUND_HALF_UP, Decimal, InvalidOperation

from .models import CATEGORY_CHOICES, MAX_COST_PER_UNIT, STOCK_STATUS_CHOICES

CATEGORIES = [value for value, _ in CATEGORY_CHOICES]
STOCK_STATUSES = [value for value, _ in STOCK_STATUS_CHOICES]

REQUIRED_FIELDS = ('productName', 'category', 'supplier', 'costPerUnit', 'warehouseCode')

LABELS = {
    'productName': 'Product name',
    'category': 'Category',
    'supplier': 'Supplier',
    'costPerUnit': 'Cost per unit',
    'warehouseCode': 'Warehouse code',
}

# wire name -> (model field, max length)
TEXT_FIELDS = {
    'productName': ('product_name', 100),
    'supplier': ('supplier', 100),
    'warehouseCode': ('warehouse_code', 20),
}

COST_QUANTUM = Decimal('0.01')

FIELD_RULES = {
    'productName': {'required': True, 'maxLength': 100},
    'category': {'required': True, 'choices': CATEGORIES},
    'supplier': {'required': True, 'maxLength': 100},
    'stockStatus': {'required': False, 'choices': STOCK_STATUSES, 'default': STOCK_STATUSES[0]},
    'costPerUnit': {'required': True, 'exclusiveMinimum': 0, 'maximum': MAX_COST_PER_UNIT, 'decimalPlaces': 2},
    'warehouseCode': {'required': True, 'maxLength': 20, 'uppercase': True, 'format': 'WH-XXX'},
}


def parse_cost(value):
    """Return the cost as an unrounded Decimal, or None if it is not a finite number."""
    if isinstance(value, bool) or value is None:
        return None
    if isinstance(value, float) and not math.isfinite(value):
        return None
    try:
        cost = Decimal(str(value).strip())
    except (InvalidOperation, ValueError):
        return None
    if not cost.is_finite():
        return None
    return cost


def round_cost(cost):
    # Callers bound the magnitude first; quantize overflows past 28 digits.
    return cost.quantize(COST_QUANTUM, rounding=ROUND_HALF_UP)


def _text_error(field, value, max_length):
    if not isinstance(value, str) or not value.strip():
        return f"{LABELS[field]} is required"
    if len(value.strip()) > max_length:
        return f"{LABELS[field]} cannot exceed {max_length} characters"
    return None


def validate_item(candidate, partial=False):
    """
    Check ``candidate`` (wire field names) against the item rules.

    With ``partial`` set only the fields present are checked; otherwise every
    required field must be present. Returns a dict of field -> message, empty
    when the candidate is valid.
    """
    if not isinstance(candidate, Mapping):
        return {'non_field_errors': 'Expected an object of item fields'}

    errors = {}

    for field in REQUIRED_FIELDS:
        if candidate.get(field) is None and (field in candidate or not partial):
            errors[field] = f"{LABELS[field]} is required"

    for field, (_, max_length) in TEXT_FIELDS.items():
        if field in candidate and field not in errors:
            message = _text_error(field, candidate[field], max_length)
            if message:
                errors[field] = message

    if 'category' in candidate and 'category' not in errors:
        if candidate['category'] not in CATEGORIES:
            errors['category'] = f"Category must be one of: {', '.join(CATEGORIES)}"

    if 'stockStatus' in candidate and candidate['stockStatus'] not in STOCK_STATUSES:
        errors['stockStatus'] = f"Stock status must be one of: {', '.join(STOCK_STATUSES)}"

    if 'costPerUnit' in candidate and 'costPerUnit' not in errors:
        cost = parse_cost(candidate['costPerUnit'])
        if cost is not None and cost > MAX_COST_PER_UNIT:
            errors['costPerUnit'] = 'Cost cannot exceed $1,000,000'
        elif cost is None or cost <= 0 or round_cost(cost) <= 0:
            errors['costPerUnit'] = 'Valid cost is required (must be greater than 0)'

    return errors


def normalize_item(candidate):
    """Map the wire fields present in ``candidate`` onto model field values."""
    values = {}
    for field, (model_field, _) in TEXT_FIELDS.items():
        if field in candidate:
            values[model_field] = candidate[field].strip()
    if 'warehouse_code' in values:
        values['warehouse_code'] = values['warehouse_code'].upper()
    if 'category' in candidate:
        values['category'] = candidate['category']
    if 'stockStatus' in candidate:
        values['stock_status'] = candidate['stockStatus']
    if 'costPerUnit' in candidate:
        values['cost_per_unit'] = round_cost(parse_cost(candidate['costPerUnit']))
    return values
