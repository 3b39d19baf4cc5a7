"""
Query parameter validation for month and custom-range list filters.

Lists default to the current IST month. ``mode=custom`` takes explicit
``start_date``/``end_date`` days instead; either bound may be left out.
"""
from rest_framework import serializers

from .ist import current_ist_month, day_bound, month_bounds

# Years accepted by period filters
MIN_YEAR = 2000
MAX_YEAR = 2100


class PeriodMode:
    MONTH = 'month'
    CUSTOM = 'custom'

    choices = [
        (MONTH, 'Month'),
        (CUSTOM, 'Custom range'),
    ]


class PeriodFilterSerializer(serializers.Serializer):
    """
    Validate query parameters for period filtering.

    Query Parameters:
        mode (str): 'month' (default) or 'custom'
        month (int): 0-based month, defaults to the current IST month
        year (int): Year, defaults to the current IST year
        start_date (date): First IST day of a custom range
        end_date (date): Last IST day of a custom range
    """

    mode = serializers.ChoiceField(choices=PeriodMode.choices, required=False, default=PeriodMode.MONTH)
    month = serializers.IntegerField(required=False, min_value=0, max_value=11)
    year = serializers.IntegerField(required=False, min_value=MIN_YEAR, max_value=MAX_YEAR)
    start_date = serializers.DateField(required=False, allow_null=True)
    end_date = serializers.DateField(required=False, allow_null=True)

    def _check_year(self, value):
        if value and not MIN_YEAR <= value.year <= MAX_YEAR:
            raise serializers.ValidationError(f"Year must be between {MIN_YEAR} and {MAX_YEAR}")
        return value

    def validate_start_date(self, value):
        return self._check_year(value)

    def validate_end_date(self, value):
        return self._check_year(value)

    def validate(self, attrs):
        """Validate date range."""
        start_date = attrs.get('start_date')
        end_date = attrs.get('end_date')

        if start_date and end_date and start_date > end_date:
            raise serializers.ValidationError({
                'end_date': 'End date must be on or after start date'
            })

        if attrs.get('mode') == PeriodMode.MONTH:
            current_month, current_year = current_ist_month()
            attrs.setdefault('month', current_month)
            attrs.setdefault('year', current_year)

        return attrs


def period_lookups(params, field='created_at'):
    """
    Translate validated period parameters into ORM lookups.

    Month mode is half-open (``gte``/``lt``), custom range is closed
    (``gte``/``lte``). A missing custom bound adds no lookup.
    """
    if params.get('mode', PeriodMode.MONTH) == PeriodMode.MONTH:
        start, end = month_bounds(params['month'], params['year'])
        return {f'{field}__gte': start, f'{field}__lt': end}

    lookups = {}
    start = day_bound(params.get('start_date'))
    end = day_bound(params.get('end_date'), end_of_day=True)
    if start is not None:
        lookups[f'{field}__gte'] = start
    if end is not None:
        lookups[f'{field}__lte'] = end
    return lookups
