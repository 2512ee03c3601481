# utils/services.py
import logging
import time

from django.conf import settings
from django.db import InterfaceError, OperationalError, connection, transaction
from django.db.models import F

from .exceptions import ServiceUnavailable
from .models import Counter

logger = logging.getLogger(__name__)


@transaction.atomic
def get_next_number(key: str, start: int = 1) -> int:
    """
    Increment the counter stored under ``key`` and return the new value.

    The row is created on first use so that the first call returns ``start``.
    The increment is a single UPDATE statement; the row lock it takes is held
    until the surrounding transaction ends, so concurrent callers for the same
    key are serialized by the database.
    """
    Counter.objects.get_or_create(key=key, defaults={'value': start - 1})
    Counter.objects.filter(key=key).update(value=F('value') + 1)
    return Counter.objects.values_list('value', flat=True).get(key=key)


def call_with_retry(func, attempts=None, backoff=None):
    """
    Run ``func`` and retry it on transient store errors with exponential backoff.

    Raises ServiceUnavailable once ``attempts`` are used up. Any other exception,
    IntegrityError included, propagates on the first occurrence.
    """
    if attempts is None:
        attempts = settings.STORE_RETRY_ATTEMPTS
    if backoff is None:
        backoff = settings.STORE_RETRY_BACKOFF

    for attempt in range(1, attempts + 1):
        try:
            return func()
        except (OperationalError, InterfaceError) as e:
            logger.warning(f"Store error on attempt {attempt}/{attempts}: {e}")
            if not connection.in_atomic_block:
                connection.close_if_unusable_or_obsolete()
            if attempt == attempts:
                raise ServiceUnavailable() from e
            time.sleep(backoff * (2 ** (attempt - 1)))
