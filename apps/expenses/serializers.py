from rest_framework import serializers

from apps.common.filters import PeriodFilterSerializer
from apps.common.ist import format_ist
from .models import Expense


class ExpenseFilterSerializer(PeriodFilterSerializer):
    """Period parameters for expense lists; see PeriodFilterSerializer."""


class ExpenseCreateSerializer(serializers.Serializer):
    """Serializer for recording an expense; GST defaults to zero."""

    type = serializers.CharField(max_length=100)
    amount = serializers.DecimalField(max_digits=14, decimal_places=2, min_value=0)
    gst = serializers.DecimalField(max_digits=14, decimal_places=2, min_value=0, required=False, allow_null=True)
    description = serializers.CharField(required=False, allow_blank=True, default='')


class ExpenseSerializer(serializers.ModelSerializer):
    """Expense with its computed total and an IST timestamp for display."""

    total_expense = serializers.DecimalField(max_digits=15, decimal_places=2, read_only=True)
    taxable = serializers.DecimalField(max_digits=14, decimal_places=2, source='totals.taxable', read_only=True)
    tax = serializers.DecimalField(max_digits=14, decimal_places=2, source='totals.tax', read_only=True)
    grand_total = serializers.DecimalField(
        max_digits=15, decimal_places=2, source='totals.grand_total', read_only=True
    )
    created_at_display = serializers.SerializerMethodField()

    class Meta:
        model = Expense
        fields = [
            'id',
            'type',
            'description',
            'amount',
            'gst',
            'total_expense',
            'taxable',
            'tax',
            'grand_total',
            'created_at',
            'created_at_display',
        ]
        read_only_fields = fields

    def get_created_at_display(self, obj):
        return format_ist(obj.created_at)
