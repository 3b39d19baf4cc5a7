from django.contrib import admin

from apps.common.finance import format_currency
from .models import PurchaseBill, SellBill


class BaseBillAdmin(admin.ModelAdmin):
    """
    Read-mostly admin for bills.

    Bills are priced by BillService, so they cannot be added or edited here.
    """

    list_display = [
        'display_number',
        'customer',
        'contact',
        'taxable_display',
        'tax_display',
        'grand_total_display',
        'created_at',
    ]
    search_fields = ['customer', 'contact', 'description', 'bill_number']
    date_hierarchy = 'created_at'
    ordering = ['-created_at']
    readonly_fields = [
        'bill_number',
        'customer',
        'contact',
        'description',
        'items',
        'total',
        'gst',
        'created_at',
    ]

    def taxable_display(self, obj):
        return format_currency(obj.totals().taxable)
    taxable_display.short_description = 'Taxable'

    def tax_display(self, obj):
        return format_currency(obj.totals().tax)
    tax_display.short_description = 'GST'

    def grand_total_display(self, obj):
        return format_currency(obj.totals().grand_total)
    grand_total_display.short_description = 'Grand total'

    def has_add_permission(self, request):
        return False

    def has_change_permission(self, request, obj=None):
        return False


@admin.register(PurchaseBill)
class PurchaseBillAdmin(BaseBillAdmin):
    pass


@admin.register(SellBill)
class SellBillAdmin(BaseBillAdmin):
    pass
