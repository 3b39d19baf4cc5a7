from rest_framework import serializers

from apps.common.filters import MAX_YEAR, MIN_YEAR
from apps.common.ist import current_ist_month


# =============================================================================
# Input Serializers
# =============================================================================

class DashboardQuerySerializer(serializers.Serializer):
    """
    Validate dashboard query parameters.

    Query Parameters:
        month (int): 0-based month, defaults to the current IST month
        year (int): Year, defaults to the current IST year
    """

    month = serializers.IntegerField(required=False, min_value=0, max_value=11)
    year = serializers.IntegerField(required=False, min_value=MIN_YEAR, max_value=MAX_YEAR)

    def validate(self, attrs):
        current_month, current_year = current_ist_month()
        attrs.setdefault('month', current_month)
        attrs.setdefault('year', current_year)
        return attrs


# =============================================================================
# Response Serializers
# =============================================================================

def money():
    return serializers.DecimalField(max_digits=20, decimal_places=2)


class PeriodSerializer(serializers.Serializer):
    month = serializers.IntegerField()
    year = serializers.IntegerField()
    label = serializers.CharField()
    start = serializers.CharField(help_text='UTC instant, inclusive')
    end = serializers.CharField(help_text='UTC instant, exclusive')


class CategoryTotalsSerializer(serializers.Serializer):
    """Totals of one record kind."""
    count = serializers.IntegerField()
    amount = money()
    gst = money()
    total = money()


class NetPositionSerializer(serializers.Serializer):
    gst_payable = money()
    inflow = money()
    outflow = money()
    cash_flow = money()


class DashboardResponseSerializer(serializers.Serializer):
    """Response serializer for the monthly dashboard."""
    period = PeriodSerializer()
    sales = CategoryTotalsSerializer()
    purchases = CategoryTotalsSerializer()
    expenses = CategoryTotalsSerializer()
    net = NetPositionSerializer()


class ErrorSerializer(serializers.Serializer):
    """Standard error response serializer."""
    error = serializers.CharField()
