from datetime import datetime

from biztime.api.services.invoice_service import generate_paid_date

NOW = datetime(2024, 3, 1, 12, 0, 0)
EARLIER = datetime(2024, 1, 15, 9, 30, 0, 123456)


def clock():
    return NOW


def test_unpaid_to_paid_stamps_now():
    assert generate_paid_date(False, None, True, clock=clock) == NOW


def test_paid_to_unpaid_clears():
    assert generate_paid_date(True, EARLIER, False, clock=clock) is None


def test_paid_stays_paid_keeps_original_date():
    assert generate_paid_date(True, EARLIER, True, clock=clock) is EARLIER


def test_unpaid_stays_unpaid_keeps_null():
    assert generate_paid_date(False, None, False, clock=clock) is None


def test_default_clock_is_used():
    result = generate_paid_date(False, None, True)

    assert isinstance(result, datetime)
    assert result.tzinfo is None
