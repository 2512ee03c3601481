import threading
from unittest import mock

import pytest
from django.db import OperationalError, connection

from utils.exceptions import ServiceUnavailable
from utils.models import Counter
from utils.services import call_with_retry, get_next_number

pytestmark = pytest.mark.django_db


def test_first_call_creates_counter_and_returns_start():
    assert get_next_number("inventory:a") == 1
    assert Counter.objects.get(key="inventory:a").value == 1


def test_start_offset():
    assert get_next_number("payment", start=10000000) == 10000000
    assert get_next_number("payment", start=10000000) == 10000001


def test_numbers_increase_by_one_per_key():
    assert [get_next_number("inventory:a") for _ in range(5)] == [1, 2, 3, 4, 5]
    assert get_next_number("inventory:b") == 1
    assert get_next_number("inventory:a") == 6


def test_call_with_retry_returns_after_transient_errors():
    func = mock.Mock(side_effect=[OperationalError("locked"), OperationalError("locked"), 42])
    assert call_with_retry(func, attempts=3, backoff=0) == 42
    assert func.call_count == 3


def test_call_with_retry_fails_closed():
    func = mock.Mock(side_effect=OperationalError("server closed the connection"))
    with pytest.raises(ServiceUnavailable):
        call_with_retry(func, attempts=2, backoff=0)
    assert func.call_count == 2


def test_call_with_retry_does_not_retry_other_errors():
    func = mock.Mock(side_effect=ValueError("boom"))
    with pytest.raises(ValueError):
        call_with_retry(func, attempts=3, backoff=0)
    assert func.call_count == 1


@pytest.mark.django_db(transaction=True)
def test_concurrent_allocations_are_distinct():
    results = []
    lock = threading.Lock()

    def worker():
        try:
            for _ in range(10):
                number = get_next_number("inventory:concurrent")
                with lock:
                    results.append(number)
        finally:
            connection.close()

    threads = [threading.Thread(target=worker) for _ in range(8)]
    for thread in threads:
        thread.start()
    for thread in threads:
        thread.join()

    assert sorted(results) == list(range(1, 81))
