from rest_framework import serializers

from apps.common.filters import PeriodFilterSerializer
from apps.common.ist import format_ist
from .models import PurchaseBill, SellBill


# =============================================================================
# Input Serializers
# =============================================================================

class BillFilterSerializer(PeriodFilterSerializer):
    """
    Validate query parameters for bill lists.

    Query Parameters:
        search (str): Customer, contact or description text, or a bill number.
            Skips the period filter when given.
        plus the period parameters of PeriodFilterSerializer
    """

    search = serializers.CharField(required=False, allow_blank=True, max_length=100, trim_whitespace=True)


class BillItemSerializer(serializers.Serializer):
    """Single line of a bill as entered: rate per gram and weight in grams."""

    metal = serializers.CharField(max_length=50, required=False, allow_blank=True)
    rate = serializers.DecimalField(max_digits=14, decimal_places=4, min_value=0)
    weight = serializers.DecimalField(max_digits=12, decimal_places=4, min_value=0)


class PurchaseBillCreateSerializer(serializers.Serializer):
    """Serializer for creating purchase bills."""

    customer = serializers.CharField(max_length=200)
    contact = serializers.CharField(max_length=50, required=False, allow_blank=True, default='')
    description = serializers.CharField(required=False, allow_blank=True, default='')
    items = BillItemSerializer(many=True, allow_empty=False)

    def validate_items(self, items):
        """Every purchased item needs a metal and a positive rate and weight."""
        for item in items:
            if not item.get('metal', '').strip():
                raise serializers.ValidationError('Each item needs a metal')
            if item['rate'] <= 0 or item['weight'] <= 0:
                raise serializers.ValidationError('Rate and weight must be greater than zero')
        return items


class SellBillCreateSerializer(serializers.Serializer):
    """Serializer for creating sell bills; blank customer and description become N/A."""

    customer = serializers.CharField(max_length=200, required=False, allow_blank=True, default='')
    contact = serializers.CharField(max_length=50, required=False, allow_blank=True, default='')
    description = serializers.CharField(required=False, allow_blank=True, default='')
    items = BillItemSerializer(many=True, allow_empty=False)


# =============================================================================
# Output Serializers
# =============================================================================

BILL_FIELDS = [
    'id',
    'bill_number',
    'display_number',
    'customer',
    'contact',
    'description',
    'items',
    'total',
    'gst',
    'taxable',
    'tax',
    'grand_total',
    'created_at',
    'created_at_display',
]


class BaseBillSerializer(serializers.ModelSerializer):
    """Bill with its normalized totals and an IST timestamp for display."""

    display_number = serializers.CharField(read_only=True)
    taxable = serializers.DecimalField(max_digits=14, decimal_places=2, source='totals.taxable', read_only=True)
    tax = serializers.DecimalField(max_digits=14, decimal_places=2, source='totals.tax', read_only=True)
    grand_total = serializers.DecimalField(
        max_digits=14, decimal_places=2, source='totals.grand_total', read_only=True
    )
    created_at_display = serializers.SerializerMethodField()

    def get_created_at_display(self, obj):
        return format_ist(obj.created_at)


class PurchaseBillSerializer(BaseBillSerializer):

    class Meta:
        model = PurchaseBill
        fields = BILL_FIELDS
        read_only_fields = fields


class SellBillSerializer(BaseBillSerializer):

    class Meta:
        model = SellBill
        fields = BILL_FIELDS
        read_only_fields = fields
