"""
Tests for IST period boundaries and display formatting.

Expected instants are derived independently: build the IST wall-clock
time as if it were UTC, then subtract 5h30m.
"""
from datetime import date, datetime, timedelta, timezone

import pytest

from apps.common.ist import (
    IST_OFFSET,
    day_bound,
    format_ist,
    ist_date_bound,
    ist_month_range,
    month_bounds,
    month_label,
    parse_timestamp,
    to_utc_iso,
)

OFFSET_MS = 19_800_000


def expected_iso(*wall_clock):
    """Wall-clock tuple shifted back by the IST offset, as an ISO string."""
    moment = datetime(*wall_clock, tzinfo=timezone.utc) - timedelta(milliseconds=OFFSET_MS)
    return moment.strftime('%Y-%m-%dT%H:%M:%S.') + f"{moment.microsecond // 1000:03d}Z"


class TestOffset:
    def test_offset_is_five_and_a_half_hours(self):
        assert IST_OFFSET == timedelta(hours=5, minutes=30)
        assert IST_OFFSET.total_seconds() * 1000 == OFFSET_MS


# =============================================================================
# Month mode
# =============================================================================

class TestMonthRange:
    """Tests for ist_month_range (half-open month bounds)."""

    def test_january_2026(self):
        """January 2026 starts Dec 31 18:30 UTC and ends Jan 31 18:30 UTC."""
        result = ist_month_range(0, 2026)

        assert result == {
            'start': '2025-12-31T18:30:00.000Z',
            'end': '2026-01-31T18:30:00.000Z',
        }

    def test_matches_offset_formula(self):
        result = ist_month_range(5, 2026)

        assert result['start'] == expected_iso(2026, 6, 1)
        assert result['end'] == expected_iso(2026, 7, 1)

    def test_december_rolls_into_next_year(self):
        result = ist_month_range(11, 2025)

        assert result['start'] == expected_iso(2025, 12, 1)
        assert result['end'] == expected_iso(2026, 1, 1)

    def test_february_leap_year(self):
        start, end = month_bounds(1, 2028)

        assert end - start == timedelta(days=29)

    def test_month_overflow_uses_calendar_arithmetic(self):
        """Month 12 is January of the following year."""
        assert ist_month_range(12, 2025) == ist_month_range(0, 2026)

    def test_negative_month_rolls_back(self):
        """Month -1 is December of the previous year."""
        assert ist_month_range(-1, 2026) == ist_month_range(11, 2025)

    def test_month_beyond_supported_years_raises(self):
        with pytest.raises(ValueError):
            ist_month_range(11, 9999)
        with pytest.raises(ValueError):
            month_bounds(0, 1)

    def test_consecutive_months_share_a_boundary(self):
        assert ist_month_range(2, 2026)['end'] == ist_month_range(3, 2026)['start']

    def test_bounds_are_aware_utc(self):
        start, end = month_bounds(0, 2026)

        assert start.tzinfo is not None
        assert start.utcoffset() == timedelta(0)
        assert start == datetime(2025, 12, 31, 18, 30, tzinfo=timezone.utc)


# =============================================================================
# Range mode
# =============================================================================

class TestDateBound:
    """Tests for ist_date_bound (closed custom range bounds)."""

    def test_start_of_day(self):
        assert ist_date_bound('2026-01-15', False) == '2026-01-14T18:30:00.000Z'
        assert ist_date_bound('2026-01-15', False) == expected_iso(2026, 1, 15)

    def test_end_of_day(self):
        result = ist_date_bound('2026-01-15', True)

        assert result == expected_iso(2026, 1, 15, 23, 59, 59, 999000)
        assert result == '2026-01-15T18:29:59.999Z'

    def test_first_of_year_start_falls_in_previous_year(self):
        assert ist_date_bound('2026-01-01') == '2025-12-31T18:30:00.000Z'

    @pytest.mark.parametrize('value', [None, ''])
    def test_absent_date_has_no_bound(self, value):
        assert ist_date_bound(value, False) is None
        assert ist_date_bound(value, True) is None

    def test_malformed_date_has_no_bound(self):
        assert ist_date_bound('not-a-date') is None

    @pytest.mark.parametrize('value', ['0000-01-01', '0001-01-01', '10000-01-01', date(1, 1, 1)])
    def test_unrepresentable_date_has_no_bound(self, value):
        """Days whose UTC bound falls outside datetime's range give no bound."""
        assert ist_date_bound(value, False) is None
        assert day_bound(value) is None

    def test_last_representable_day_end_bound(self):
        assert ist_date_bound('9999-12-31', True) == '9999-12-31T18:29:59.999Z'

    def test_accepts_date_objects(self):
        assert ist_date_bound(date(2026, 1, 15), True) == ist_date_bound('2026-01-15', True)

    def test_day_bound_returns_datetime(self):
        bound = day_bound('2026-03-10')

        assert bound == datetime(2026, 3, 9, 18, 30, tzinfo=timezone.utc)

    def test_single_day_range_spans_one_day(self):
        start = day_bound('2026-03-10')
        end = day_bound('2026-03-10', end_of_day=True)

        assert end - start == timedelta(days=1) - timedelta(milliseconds=1)


# =============================================================================
# Display
# =============================================================================

class TestFormatIST:
    """Tests for IST display formatting."""

    def test_zulu_timestamp(self):
        assert format_ist('2026-01-15T10:00:00Z') == '15 Jan 2026, 03:30 pm'

    def test_naive_space_separated_timestamp_is_utc(self):
        """Postgres-style timestamps without a zone are UTC, not local time."""
        assert format_ist('2026-01-15 10:00:00') == format_ist('2026-01-15T10:00:00Z')

    def test_offset_timestamp(self):
        assert format_ist('2026-01-15T10:00:00+00:00') == '15 Jan 2026, 03:30 pm'

    def test_fractional_seconds(self):
        assert format_ist('2026-01-15 10:00:00.123456') == '15 Jan 2026, 03:30 pm'

    def test_morning_and_midnight(self):
        assert format_ist('2026-01-14T18:30:00Z') == '15 Jan 2026, 12:00 am'
        assert format_ist('2026-01-15T00:00:00Z') == '15 Jan 2026, 05:30 am'

    def test_noon(self):
        assert format_ist('2026-01-15T06:30:00Z') == '15 Jan 2026, 12:00 pm'

    def test_datetime_input(self):
        moment = datetime(2026, 1, 15, 10, 0, tzinfo=timezone.utc)

        assert format_ist(moment) == '15 Jan 2026, 03:30 pm'

    @pytest.mark.parametrize('value', [None, '', 'garbage'])
    def test_missing_or_invalid(self, value):
        assert format_ist(value) == 'N/A'

    def test_instant_past_last_ist_day(self):
        assert format_ist('9999-12-31T23:00:00Z') == 'N/A'


class TestHelpers:
    def test_to_utc_iso_keeps_milliseconds(self):
        moment = datetime(2026, 1, 15, 18, 29, 59, 999999, tzinfo=timezone.utc)

        assert to_utc_iso(moment) == '2026-01-15T18:29:59.999Z'

    def test_parse_timestamp_naive_is_utc(self):
        assert parse_timestamp('2026-01-15 10:00:00').tzinfo == timezone.utc

    def test_month_label(self):
        assert month_label(0, 2026) == 'January 2026'
        assert month_label(12, 2025) == 'January 2026'
