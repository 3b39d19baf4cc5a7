"""
India Standard Time period boundaries.

Bills are stored with UTC ``created_at`` timestamps while the shop reports by
IST calendar months and days. The helpers here turn an IST period into the
UTC instants bounding it:

- month mode is half-open: ``start <= created_at < end``
- custom range mode is closed: ``start <= created_at <= end``

IST is a fixed UTC+05:30 offset with no daylight saving, so conversion is a
plain subtraction of ``IST_OFFSET`` from the IST wall-clock time.

Example:
    >>> ist_month_range(0, 2026)
    {'start': '2025-12-31T18:30:00.000Z', 'end': '2026-01-31T18:30:00.000Z'}
    >>> ist_date_bound('2026-01-15', end_of_day=True)
    '2026-01-15T18:29:59.999Z'
"""

from datetime import date, datetime, timedelta, timezone
from typing import Optional, Tuple, Union

IST_OFFSET = timedelta(hours=5, minutes=30)
IST = timezone(IST_OFFSET, 'IST')

MONTH_NAMES = (
    'January', 'February', 'March', 'April', 'May', 'June',
    'July', 'August', 'September', 'October', 'November', 'December',
)
MONTH_ABBREVIATIONS = tuple(name[:3] for name in MONTH_NAMES)

DateInput = Union[str, date, None]


def ist_wall_to_utc(year, month_index, day=1, hour=0, minute=0, second=0, microsecond=0):
    """
    Convert an IST wall-clock time to an aware UTC datetime.

    ``month_index`` is 0-based and may fall outside 0..11; it rolls over
    into neighbouring years. ``day`` may likewise overflow the month.

    Raises:
        ValueError: If the instant falls outside the years ``datetime`` supports.
    """
    carry, month_index = divmod(month_index, 12)
    try:
        wall = datetime(year + carry, month_index + 1, 1, hour, minute, second, microsecond, tzinfo=timezone.utc)
        wall += timedelta(days=day - 1)
        return wall - IST_OFFSET
    except OverflowError as e:
        raise ValueError(f"IST time out of range: {e}") from e


def to_utc_iso(moment: datetime) -> str:
    """Render an aware datetime as ``YYYY-MM-DDTHH:MM:SS.mmmZ``."""
    moment = moment.astimezone(timezone.utc)
    return f"{moment:%Y-%m-%dT%H:%M:%S}.{moment.microsecond // 1000:03d}Z"


def month_bounds(month: int, year: int) -> Tuple[datetime, datetime]:
    """
    UTC instants bounding an IST month (0-based), end exclusive.

    Raises ValueError for months outside the years ``datetime`` supports.
    """
    return ist_wall_to_utc(year, month), ist_wall_to_utc(year, month + 1)


def ist_month_range(month: int, year: int) -> dict:
    """Half-open UTC range of an IST month as ISO strings."""
    start, end = month_bounds(month, year)
    return {'start': to_utc_iso(start), 'end': to_utc_iso(end)}


def _split_date(value: DateInput) -> Optional[Tuple[int, int, int]]:
    if isinstance(value, date):
        return value.year, value.month, value.day
    try:
        year, month, day = (int(part) for part in value.split('-'))
    except (AttributeError, ValueError):
        return None
    return year, month, day


def day_bound(value: DateInput, end_of_day: bool = False) -> Optional[datetime]:
    """
    UTC instant at the start (00:00:00.000) or end (23:59:59.999) of an IST day.

    Returns None when there is no usable date, meaning no bound applies.
    Dates whose bound cannot be represented count as unusable.
    """
    if not value:
        return None
    parts = _split_date(value)
    if parts is None:
        return None
    year, month, day = parts
    try:
        if end_of_day:
            return ist_wall_to_utc(year, month - 1, day, 23, 59, 59, 999000)
        return ist_wall_to_utc(year, month - 1, day)
    except ValueError:
        return None


def ist_date_bound(value: DateInput, end_of_day: bool = False) -> Optional[str]:
    bound = day_bound(value, end_of_day)
    return to_utc_iso(bound) if bound is not None else None


def ist_now() -> datetime:
    return datetime.now(timezone.utc).astimezone(IST)


def current_ist_month() -> Tuple[int, int]:
    """Return the current (0-based month, year) in IST."""
    now = ist_now()
    return now.month - 1, now.year


def month_label(month: int, year: int) -> str:
    carry, month = divmod(month, 12)
    return f"{MONTH_NAMES[month]} {year + carry}"


def parse_timestamp(value) -> Optional[datetime]:
    """
    Parse a stored timestamp into an aware datetime.

    Timestamps without a zone marker, such as Postgres' ``2026-01-15 10:00:00``,
    are UTC and never local time.
    """
    if isinstance(value, datetime):
        moment = value
    else:
        text = str(value or '').strip()
        if not text:
            return None
        try:
            moment = datetime.fromisoformat(text)
        except ValueError:
            return None
    if moment.tzinfo is None:
        moment = moment.replace(tzinfo=timezone.utc)
    return moment


def format_ist(value) -> str:
    """
    Human-readable IST rendering of a stored timestamp.

    Examples:
        >>> format_ist('2026-01-15T10:00:00Z')
        '15 Jan 2026, 03:30 pm'
        >>> format_ist('2026-01-15 10:00:00')
        '15 Jan 2026, 03:30 pm'
    """
    moment = parse_timestamp(value)
    if moment is None:
        return 'N/A'
    try:
        local = moment.astimezone(IST)
    except OverflowError:
        return 'N/A'
    hour = local.hour % 12 or 12
    meridiem = 'am' if local.hour < 12 else 'pm'
    return (
        f"{local.day:02d} {MONTH_ABBREVIATIONS[local.month - 1]} {local.year}, "
        f"{hour:02d}:{local.minute:02d} {meridiem}"
    )
