from datetime import date, datetime
from datetime import timezone as dt_timezone

from core.dates import as_date, is_month_past, last_friday, month_name, period_key


def test_as_date_accepts_common_inputs():
    assert as_date(None) is None
    assert as_date("") is None
    assert as_date("2025-03-14") == date(2025, 3, 14)
    assert as_date("2025-03-14T23:00:00") == date(2025, 3, 14)
    assert as_date(date(2025, 3, 14)) == date(2025, 3, 14)
    assert as_date(datetime(2025, 3, 14, 8, 0)) == date(2025, 3, 14)


def test_as_date_uses_local_time_for_aware_datetimes():
    # 01:00 UTC is still the previous evening in São Paulo.
    assert as_date(datetime(2025, 3, 15, 1, 0, tzinfo=dt_timezone.utc)) == date(2025, 3, 14)


def test_period_key_and_month_name():
    assert period_key(2025, 3) == "2025-03"
    assert month_name(1) == "janeiro"
    assert month_name(12) == "dezembro"


def test_last_friday():
    assert last_friday(date(2025, 3, 14)) == date(2025, 3, 14)
    assert last_friday(date(2025, 3, 13)) == date(2025, 3, 7)
    assert last_friday(date(2025, 3, 16)) == date(2025, 3, 14)


def test_is_month_past():
    as_of = date(2025, 6, 15)
    assert is_month_past(2025, 6, as_of)
    assert not is_month_past(2025, 7, as_of)
    assert is_month_past(2024, 12, as_of)
